# CipherLab
"""
Educational toolkit for classical and historical ciphers.

Every engine returns its result together with the step-by-step trace
of the computation, so a front-end can show how the answer was reached:
- RSA (key generation, encrypt/decrypt, sign/verify, combined mode)
- Caesar cipher (Latin and Vietnamese alphabets)
- Playfair cipher
- Rail Fence columnar transposition
"""

__version__ = "1.0.0"
