"""gitlink - copy provider permalinks for lines of a file in a Git working copy."""
