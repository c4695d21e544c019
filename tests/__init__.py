# PairBox Test Suite
"""
Test suite including:
- Unit tests per component
- Integration tests (handshake then channel)
- Security tests (tampering, wrong keys, malformed input)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
