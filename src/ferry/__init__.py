"""ferry - move a single commit onto a fresh branch and open a pull request."""
