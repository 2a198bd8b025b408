"""Text user interface for the project tracker."""
