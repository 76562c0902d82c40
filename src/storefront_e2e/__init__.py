"""storefront-e2e: workflow automation and e2e scenarios for the AutomationExercise storefront."""

__version__ = "0.1.0"
