"""Infrastructure layer: HTTP and SOAP clients for the ACH service."""
