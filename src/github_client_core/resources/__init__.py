"""Resource facades built on the client core.

Facades bind a fixed path and a response model to ``GitHubClient.execute``
or ``GitHubClient.paginate``; they hold no other logic.
"""

from github_client_core.resources.labels import Label, LabelOptions, PullLabels, RepoLabels
from github_client_core.resources.rate_limit import RateLimit, get_rate_limit

__all__ = ["Label", "LabelOptions", "PullLabels", "RateLimit", "RepoLabels", "get_rate_limit"]
