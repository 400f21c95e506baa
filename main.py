"""
Hiero Keys Library Usage Examples

This file demonstrates key features of the hiero_keys library.
"""

import logging

from hiero_keys import (
    ByteImportEncoding,
    EcdsaPrivateKey,
    HieroKeysError,
    KeyAlgorithm,
    KeyFormat,
    PrivateKey,
    PublicKey,
    create_private_key,
    private_key_from_pem,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def generation_example():
    """Example 1: Generate keys and sign."""
    print("\n=== Key Generation Example ===")

    for algorithm in KeyAlgorithm:
        private_key = PrivateKey.generate(algorithm)
        public_key = private_key.create_public_key()
        print(f"{algorithm.value} private key: {private_key!r}")
        print(f"{algorithm.value} public key: {public_key.hex()}")

        message = b"Hello Hiero!"
        signature = private_key.sign(message)
        print(f"Signature: {signature.hex()[:16]}...")
        print(f"Valid: {public_key.verify(message, signature)}")


def container_example():
    """Example 2: Export and import PKCS#8 / SPKI containers."""
    print("\n=== Container Example ===")

    private_key = PrivateKey.generate(KeyAlgorithm.ED25519)

    # Export as PEM
    pem = private_key.to_string(KeyFormat.PKCS8_WITH_PEM)
    print(pem)

    # Import from PEM (CRLF line endings are accepted too)
    imported = private_key_from_pem(pem.replace("\n", "\r\n"))
    print(f"PEM round trip equal: {imported == private_key}")

    # DER export of the public key
    public_key = private_key.create_public_key()
    der = public_key.to_bytes(KeyFormat.SPKI_WITH_DER)
    print(f"SPKI DER: {der.hex()}")
    print(f"DER round trip equal: {PublicKey.create(KeyFormat.SPKI_WITH_DER, der) == public_key}")


def raw_import_example():
    """Example 3: Raw and text import."""
    print("\n=== Raw Import Example ===")

    # secp256k1 key with d = 1; its public key is the generator point
    key = EcdsaPrivateKey.from_scalar(1)
    print(f"Generator (compressed): {key.create_public_key().hex()}")
    print(f"Generator (uncompressed): {key.create_public_key().to_uncompressed_bytes().hex()}")

    same_key = create_private_key(KeyAlgorithm.ECDSA, ByteImportEncoding.HEX, "0x" + key.hex())
    print(f"Hex import equal: {same_key == key}")

    # Wrong container for the key type
    try:
        key.to_string(KeyFormat.SPKI_WITH_PEM)
    except HieroKeysError as e:
        print(f"Expected error: {e}")


def main():
    """Run all examples."""
    examples = [
        generation_example,
        container_example,
        raw_import_example,
    ]

    for example in examples:
        try:
            example()
        except HieroKeysError as e:
            print(f"Error in {example.__name__}: {e}")


if __name__ == "__main__":
    # Run examples
    main()
