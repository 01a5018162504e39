from zendesk_help_center.core.application.normalization.field_projector import project_article
from zendesk_help_center.core.application.normalization.html_normalizer import normalize_html

__all__ = ["normalize_html", "project_article"]
