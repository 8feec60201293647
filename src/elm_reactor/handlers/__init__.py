"""Request handlers composed by the dispatcher.

Each handler takes the request and its sanitized path and returns a response,
or None to pass the request on to the next handler.
"""
