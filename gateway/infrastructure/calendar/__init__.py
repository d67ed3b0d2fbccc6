from .google_calendar_client import GoogleCalendarClient, service_account_credentials

__all__ = ["GoogleCalendarClient", "service_account_credentials"]
