"""Classical and block ciphers (Caesar, Vigenere, Vernam, Hill, Playfair,
Diffie-Hellman, RSA, DES, AES) with small command-line tools."""

__version__ = "0.1.0"