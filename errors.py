class ChatFormatError(ValueError):
    """Raised when a chat export or a keyword rules file cannot be used.

    Plain parsing never raises this; only strict mode and rule loading do.
    """
