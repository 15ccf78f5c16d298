from .manage_availability import ManageAvailabilityService as ManageAvailabilityService
