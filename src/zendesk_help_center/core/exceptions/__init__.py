from zendesk_help_center.core.exceptions.configuration_error import ConfigurationError
from zendesk_help_center.core.exceptions.help_center_error import HelpCenterError
from zendesk_help_center.core.exceptions.malformed_input_error import MalformedInputError
from zendesk_help_center.core.exceptions.request_failure_error import RequestFailureError

__all__ = ["ConfigurationError", "HelpCenterError", "MalformedInputError", "RequestFailureError"]
