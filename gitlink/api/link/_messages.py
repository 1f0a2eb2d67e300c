"""User-facing messages for the link commands."""

SUCCESS_MESSAGE = "Remote Git link copied to clipboard"
FAILURE_MESSAGE = "Could not copy remote Git link to clipboard because"

DIRTY_WARNING = "there are local changes so the link may be incorrect"

# Failure reasons, one per precondition
REPOSITORY_UNAVAILABLE = "the Git repository is not available."
NO_REMOTES = "there are no remotes."
NO_HEAD = "there is no HEAD."
NO_ACTIVE_EDITOR = "there is no active editor."
OUTSIDE_REPOSITORY = "the active file is not inside the repository."
UNKNOWN_HOST = "the remote Git host is unknown."

SHOW_FAILURE_MESSAGE = "Could not build remote Git link because"
