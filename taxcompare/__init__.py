"""taxcompare: Old vs New regime income-tax comparison (FY 2024-25)."""

__version__ = "0.1.0"
