#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                         CIPHERLAB LIVE DEMO                                   ║
║                  Classical Ciphers, Step by Step                              ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through every engine of CipherLab, printing the
intermediate values a lecturer would write on the board:
- RSA key generation (extended Euclidean algorithm)
- RSA encryption, decryption, signing and verification (square-and-multiply)
- Caesar cipher on the Latin and Vietnamese alphabets
- Playfair cipher
- Rail Fence transposition with a repeated-letter key

Run with --auto to skip the pauses.
"""

import sys

from cipherlab.classical import caesar, playfair, rail_fence
from cipherlab.errors import CipherError
from cipherlab.rsa import generate_key_pair, encrypt, decrypt, sign, verify, to_binary

AUTO = "--auto" in sys.argv[1:]


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if AUTO:
        return
    print(f"\n  [PAUSE] {message}")
    input()


def print_modexp_steps(steps):
    print(f"    {'i':>3} {'bit':>3} {'p':>6} {'p^2':>8} {'p^2 mod n':>10} {'z':>8} {'result':>7}")
    for s in steps:
        z = "" if s.multiply_product is None else s.multiply_product
        print(f"    {s.bit_index:>3} {s.bit:>3} {s.p:>6} {s.p_squared:>8} {s.p_mod:>10} {z:>8} {s.running_result:>7}")


def demo_rsa():
    print_header("PART 1: RSA")

    print_step("1.1", "Key Generation with p = 11, q = 3, e = 3")
    keys = generate_key_pair(11, 3, 3)
    params = keys.params
    print(f"\n  n = p * q = {params.n}")
    print(f"  φ(n) = (p-1)(q-1) = {params.totient}")
    print(f"  e = {params.e} (binary {to_binary(params.e)})")

    print("\n  Extended Euclidean Algorithm for d = e^-1 mod φ(n):")
    print(f"    {'q':>4} {'r1':>4} {'r2':>4} {'r':>4} {'t1':>4} {'t2':>4} {'t':>4}")
    for s in keys.euclidean_steps:
        print(f"    {s.q:>4} {s.r1:>4} {s.r2:>4} {s.r:>4} {s.t1:>4} {s.t2:>4} {s.t:>4}")
    print(f"\n  [OK] d = {params.d}")
    print(f"  Public key:  ({params.e}, {params.n})")
    print(f"  Private key: ({params.d}, {params.n})")

    pause()

    print_step("1.2", "Confidentiality: encrypt M = 9, then decrypt")
    enc = encrypt(9, keys.key_pair.public)
    print(f"\n  C = 9^{params.e} mod {params.n} = {enc.output_value}")
    print_modexp_steps(enc.steps)
    dec = decrypt(enc.output_value, keys.key_pair.private)
    print(f"\n  M = {enc.output_value}^{params.d} mod {params.n} = {dec.output_value}")
    print_modexp_steps(dec.steps)
    print(f"\n  Round trip: {'[OK]' if dec.output_value == 9 else '[X]'}")

    pause()

    print_step("1.3", "Authenticity: sign M = 5, then verify")
    sig = sign(5, keys.key_pair.private)
    ver = verify(sig.output_value, keys.key_pair.public)
    print(f"\n  S = 5^{params.d} mod {params.n} = {sig.output_value}")
    print(f"  S^{params.e} mod {params.n} = {ver.output_value}")
    print(f"  Signature valid: {'[OK]' if ver.output_value == 5 else '[X]'}")

    print_step("1.4", "Invalid input is rejected")
    try:
        generate_key_pair(11, 11)
    except CipherError as e:
        print(f"\n  [X] {e}")

    pause()


def demo_caesar():
    print_header("PART 2: CAESAR CIPHER")

    print_step("2.1", "Latin alphabet, shift 3")
    text = "Hello, World!"
    result = caesar.transform(text, 3)
    print(f"\n  Plaintext:  {text}")
    for s in result.steps[:5]:
        print(f"    {s.input_char}  {s.formula} = {s.result_value:>2} -> {s.result_char}")
    print(f"    ... ({len(result.steps)} letters)")
    print(f"  Ciphertext: {result.text}")
    print(f"  Decoded:    {caesar.decode(result.text, 3)}")

    print_step("2.2", "Vietnamese alphabet (29 letters), shift 5")
    text = "Xin chào Việt Nam"
    encoded = caesar.encode(text, 5, caesar.VIETNAMESE)
    print(f"\n  Plaintext:  {text}")
    print(f"  Ciphertext: {encoded}")
    print(f"  Decoded:    {caesar.decode(encoded, 5, caesar.VIETNAMESE)}")
    print("  (tone marks are dropped before shifting)")

    pause()


def demo_playfair():
    print_header("PART 3: PLAYFAIR CIPHER")

    key, text = "monarchy", "instruments"
    print_step("3.1", f"Key square for '{key}'")
    result = playfair.encrypt(key, text)
    print()
    for row in result.matrix:
        print("    " + " ".join(ch.upper() for ch in row))

    print_step("3.2", f"Encrypting '{text}'")
    print(f"\n  Prepared: {result.processed_text}")
    for d in result.digraphs:
        print(f"    {d.plaintext_pair.upper()} -> {d.ciphertext_pair.upper()}")
    print(f"  Ciphertext: {result.output_text}")
    print(f"  Decrypted:  {playfair.decrypt(key, result.output_text).output_text}")

    pause()


def demo_rail_fence():
    print_header("PART 4: RAIL FENCE TRANSPOSITION")

    key, text = "hello", "WE ARE DISCOVERED FLEE AT ONCE"
    print_step("4.1", f"Key '{key}' (repeated 'l'), 2 rounds")
    result = rail_fence.encrypt(text, key, 2)

    for number, trace in enumerate(result.rounds, start=1):
        print(f"\n  Round {number}:")
        print("    " + " ".join(f"{h.display_char}{h.order}".ljust(3) for h in trace.headers))
        for row in trace.table:
            print("    " + " ".join((cell or ".").ljust(3) for cell in row))
        print(f"    -> {trace.text}")

    print(f"\n  Ciphertext: {result.text}")
    print(f"  Decrypted:  {rail_fence.decrypt(result.text, key, 2).text}")


def main():

    print("\n" * 2)
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + "           CIPHERLAB - CLASSICAL CIPHERS STEP BY STEP".center(68) + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")

    print("\n  This demonstration showcases:")
    print("  • RSA with the extended Euclidean algorithm and square-and-multiply")
    print("  • Caesar cipher on two alphabets")
    print("  • Playfair digraph substitution")
    print("  • Rail Fence transposition over several rounds")

    pause("Press ENTER to begin the demonstration...")

    demo_rsa()
    demo_caesar()
    demo_playfair()
    demo_rail_fence()

    print("\n\n" + "═" * 70)
    print("  DEMONSTRATION COMPLETE!")
    print("═" * 70)


if __name__ == "__main__":
    main()
