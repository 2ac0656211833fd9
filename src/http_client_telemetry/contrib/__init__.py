"""
Optional integrations for http-client-telemetry.

Each contrib module has its own optional dependencies and is not imported
unless used.

Available contrib modules:
- opentelemetry: OpenTelemetry spans for HTTP client requests
"""
