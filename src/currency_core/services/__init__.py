"""
Shared service plumbing.

- http.py    - Pre-configured ``requests.Session`` with retry/backoff + ``check_response``
- client.py  - ``ApiClient`` base class used by every wrapper in ``datasources/``
"""
