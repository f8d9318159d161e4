# CipherLab Test Suite
"""
Test suite including:
- Unit tests per engine (number theory, RSA, Caesar, Playfair, Rail Fence)
- Command line tests
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
