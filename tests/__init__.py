"""
CDP Cookies Tests

Run all tests:
    pytest tests/ -v

Run specific test file:
    pytest tests/test_transport.py -v

No browser is needed: discovery is served by an httpx mock transport and
sessions by a local websockets server.
"""
