"""Test suite for the session guard service.

Test structure follows the test pyramid:
- unit/: Unit tests - guard, tokens, durations, events with test doubles
- integration/: Integration tests - SQLite repositories, fakeredis, crypto
- api/: API endpoint tests - login, remember-me and logout over HTTP
"""
