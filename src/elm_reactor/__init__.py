"""elm reactor - interactive development server for Elm projects."""

__version__ = "0.19.1"
