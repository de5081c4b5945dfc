"""Thin REST wrappers for third-party crypto APIs.

Each subpackage groups services of one kind:

    datasources/{kind}/
    ├── __init__.py       # Public API re-exports
    └── {service}.py      # One ApiClient subclass per service

Adding a new wrapper
--------------------
1. Subclass ``ApiClient`` and set the service constants::

       from currency_core.services.client import ApiClient

       class ExampleAPI(ApiClient):
           SERVICE = "Example"
           BASE_URL = "https://api.example.com/v1"
           SANDBOX_URL = "https://sandbox.example.com/v1"

           def ticker(self, symbol: str) -> dict[str, Any]:
               return self._get("/ticker", {"symbol": symbol})

2. If the API reports failures inside a 2xx body, override
   ``_api_error(payload)`` and return the message.

3. Auth headers go in ``_headers()``; signed endpoints must raise
   ``AuthenticationRequired`` before sending when credentials are missing.

4. Add a ``ServiceInfo`` entry in ``catalog/`` and tests in
   ``tests/test_{kind}.py``.
"""
