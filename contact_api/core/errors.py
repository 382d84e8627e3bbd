class ContactError(Exception):
    """Base class for failures of the contact submission workflow"""


class ValidationError(ContactError):
    """A required field is missing or empty"""


class PersistenceError(ContactError):
    """The record store could not save the submission"""


class NotificationError(ContactError):
    """The notification email could not be delivered"""
