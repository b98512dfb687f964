"""
HTTP middleware: CORS setup and the error handling layer that renders every
failure as a {code, message, data} envelope.
"""
