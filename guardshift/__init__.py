"""Demo data seeding for the GuardShift security-shift scheduler."""

__version__ = "0.1.0"
