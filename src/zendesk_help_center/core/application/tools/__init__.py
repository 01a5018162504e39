from zendesk_help_center.core.application.tools.help_center_tool import HelpCenterTool

__all__ = ["HelpCenterTool"]
