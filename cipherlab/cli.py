from typing import Optional

import click

from cipherlab.classical import caesar, playfair, rail_fence
from cipherlab.rsa import modexp, rsa_cipher
from cipherlab.ui import (
    caesar_table,
    configure_logging,
    digraph_table,
    euclidean_table,
    get_console,
    matrix_table,
    modexp_table,
    operation_table,
    params_table,
    rail_fence_table,
)

SECURITY_MODES = ["confidentiality", "authenticity", "both"]


def run_engine(fn, *args, **kwargs):
    """Call an engine function, turning input errors into CLI errors."""
    try:
        return fn(*args, **kwargs)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging from the engines.")
def cli(verbose: bool):
    """Classical ciphers, step by step."""
    configure_logging(verbose)


# RSA

@cli.group()
def rsa():
    """RSA key generation and operations."""
    pass


@rsa.command()
@click.argument("p", type=int)
@click.argument("q", type=int)
@click.option("-e", "--exponent", "e", type=int, default=None, help="Public exponent (smallest valid odd e if omitted).")
def keygen(p: int, q: int, e: Optional[int]):
    """Generate a key pair from primes P and Q."""
    result = run_engine(rsa_cipher.generate_key_pair, p, q, e)
    console = get_console()
    console.print(params_table(result.params))
    console.print(euclidean_table(result.euclidean_steps))
    click.echo(f"Public key: ({result.params.e}, {result.params.n})")
    click.echo(f"Private key: ({result.params.d}, {result.params.n})")


@rsa.command()
@click.argument("p", type=int)
@click.argument("q", type=int)
@click.option("--limit", default=rsa_cipher.DEFAULT_EXPONENT_LIMIT, show_default=True, help="Maximum number of exponents.")
def exponents(p: int, q: int, limit: int):
    """List valid public exponents for primes P and Q."""
    values = rsa_cipher.get_valid_public_exponents(p, q, limit)
    if not values:
        raise click.ClickException("P and Q must both be prime numbers")
    click.echo(" ".join(str(v) for v in values))


@rsa.command("run")
@click.argument("message", type=int)
@click.option("-p", required=True, type=int, help="First prime.")
@click.option("-q", required=True, type=int, help="Second prime.")
@click.option("-e", "--exponent", "e", type=int, default=None, help="Public exponent.")
@click.option("--mode", type=click.Choice(SECURITY_MODES), default="confidentiality", show_default=True)
def run(message: int, p: int, q: int, e: Optional[int], mode: str):
    """Run an RSA round trip on MESSAGE in the chosen security mode."""
    keys = run_engine(rsa_cipher.generate_key_pair, p, q, e)
    public, private = keys.key_pair.public, keys.key_pair.private
    n = keys.params.n
    console = get_console()
    console.print(params_table(keys.params))

    if mode == "confidentiality":
        forward = run_engine(rsa_cipher.encrypt, message, public)
        backward = run_engine(rsa_cipher.decrypt, forward.output_value, private)
        labels = ("Encryption", "Decryption")
    elif mode == "authenticity":
        forward = run_engine(rsa_cipher.sign, message, private)
        backward = run_engine(rsa_cipher.verify, forward.output_value, public)
        labels = ("Signature", "Verification")
    else:
        forward = run_engine(rsa_cipher.encrypt_with_both, message, private, public)
        backward = run_engine(rsa_cipher.decrypt_with_both, forward.output_value, private, public)
        labels = ("Encryption", "Decryption")

    console.print(operation_table(labels[0], forward, n))
    console.print(operation_table(labels[1], backward, n))
    click.echo(f"{labels[0]}: {forward.output_value}")
    click.echo(f"{labels[1]}: {backward.output_value}")


@cli.command("modexp")
@click.argument("base", type=int)
@click.argument("exponent", type=int)
@click.argument("modulus", type=int)
def modexp_command(base: int, exponent: int, modulus: int):
    """Fast modular exponentiation BASE^EXPONENT mod MODULUS."""
    result, steps = run_engine(modexp.mod_exp_with_steps, base, exponent, modulus)
    click.echo(f"{exponent} = {modexp.to_binary(exponent)} (binary)")
    get_console().print(modexp_table(steps, modulus))
    click.echo(f"Result: {result}")


# Caesar

def _caesar(text: str, shift: int, alphabet: str, direction: caesar.Direction):
    result = run_engine(caesar.transform, text, shift, caesar.get_alphabet(alphabet), direction)
    get_console().print(caesar_table(result.steps))
    click.echo(f"Result: {result.text}")


@cli.group("caesar")
def caesar_group():
    """Caesar shift cipher."""
    pass


@caesar_group.command("encode")
@click.argument("text")
@click.option("--shift", "-s", default=caesar.DEFAULT_SHIFT, show_default=True)
@click.option("--alphabet", "-a", type=click.Choice(sorted(caesar.ALPHABETS)), default="latin", show_default=True)
def caesar_encode(text: str, shift: int, alphabet: str):
    """Encode TEXT."""
    _caesar(text, shift, alphabet, caesar.Direction.ENCODE)


@caesar_group.command("decode")
@click.argument("text")
@click.option("--shift", "-s", default=caesar.DEFAULT_SHIFT, show_default=True)
@click.option("--alphabet", "-a", type=click.Choice(sorted(caesar.ALPHABETS)), default="latin", show_default=True)
def caesar_decode(text: str, shift: int, alphabet: str):
    """Decode TEXT."""
    _caesar(text, shift, alphabet, caesar.Direction.DECODE)


# Playfair

@cli.group("playfair")
def playfair_group():
    """Playfair digraph cipher."""
    pass


@playfair_group.command("encrypt")
@click.argument("key")
@click.argument("text")
@click.option("--separator", default=playfair.DEFAULT_SEPARATOR, show_default=True, help="Letter between doubled letters.")
@click.option("--pad/--no-pad", default=True, show_default=True, help="Pad an odd-length text with the separator.")
def playfair_encrypt(key: str, text: str, separator: str, pad: bool):
    """Encrypt TEXT with KEY."""
    result = run_engine(playfair.encrypt, key, text, separator, pad)
    console = get_console()
    console.print(matrix_table(result.matrix))
    console.print(digraph_table(result.digraphs))
    click.echo(f"Prepared: {result.processed_text}")
    click.echo(f"Result: {result.output_text}")


@playfair_group.command("decrypt")
@click.argument("key")
@click.argument("text")
def playfair_decrypt(key: str, text: str):
    """Decrypt TEXT with KEY."""
    result = run_engine(playfair.decrypt, key, text)
    console = get_console()
    console.print(matrix_table(result.matrix))
    console.print(digraph_table(result.digraphs))
    click.echo(f"Result: {result.output_text}")


# Rail Fence

@cli.group("railfence")
def railfence_group():
    """Rail Fence columnar transposition."""
    pass


def _rail_fence(fn, key: str, text: str, rounds: int):
    result = run_engine(fn, text, key, rounds)
    console = get_console()
    for number, trace in enumerate(result.rounds, start=1):
        console.print(rail_fence_table(trace, number))
    click.echo(f"Result: {result.text}")


@railfence_group.command("encrypt")
@click.argument("key")
@click.argument("text")
@click.option("--rounds", "-r", default=rail_fence.DEFAULT_ROUNDS, show_default=True, help="Transposition rounds.")
def railfence_encrypt(key: str, text: str, rounds: int):
    """Encrypt TEXT with KEY."""
    _rail_fence(rail_fence.encrypt, key, text, rounds)


@railfence_group.command("decrypt")
@click.argument("key")
@click.argument("text")
@click.option("--rounds", "-r", default=rail_fence.DEFAULT_ROUNDS, show_default=True, help="Transposition rounds.")
def railfence_decrypt(key: str, text: str, rounds: int):
    """Decrypt TEXT with KEY."""
    _rail_fence(rail_fence.decrypt, key, text, rounds)


if __name__ == "__main__":
    cli()
