class HelpCenterError(Exception):
    """
    Base class for every error raised by the Help Center package.
    Adapters catch this type to report a failure and keep accepting input.
    """

    pass
