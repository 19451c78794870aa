"""
Dealership marketing site back office: cars, services, appointments.
"""

__version__ = "1.0.0"
