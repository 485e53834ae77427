"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface): any argument a subcommand needs but
was not given on the command line is asked for interactively, unless non-interactive mode is active, in which case
defaults are used or the run fails.

Integers may be given in any Python literal base, e.g. `65537`, `0x10001` or `0b10000000000000001`.

Typical usage example:

    rsacore keygen --digits 50
    OR
    python -m rsacore -n isprime --candidate 0x7fffffffffffffffffffffffffffffff
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import random
import sys
import typing
import warnings

import rsacore


def literal(text: str) -> int:
    """Parse an integer literal of any base prefix."""
    return int(text, 0)


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = literal
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Core.",
            choices=["keygen", "encrypt", "decrypt", "isprime"],
        ),
    "keygen":
        HelpData("Key pair generation utility."),
    "encrypt":
        HelpData("Textbook encryption utility."),
    "decrypt":
        HelpData("Textbook decryption utility."),
    "isprime":
        HelpData("Miller-Rabin primality test."),
    "digits":
        HelpData(
            description="Decimal digits of the lower prime sampling bound.",
            format=int,
            default=rsacore.keygen.DEFAULT_DIGITS,
        ),
    "modulus":
        HelpData(description="Modulus of the key pair."),
    "exponent":
        HelpData(
            description="Public exponent.",
            default=rsacore.PUBLIC_EXPONENT,
        ),
    "private_exponent":
        HelpData(description="Private exponent."),
    "message":
        HelpData(description="Integer message representative, in range [0, modulus-1]."),
    "ciphertext":
        HelpData(description="Integer ciphertext."),
    "candidate":
        HelpData(description="Integer to test for primality."),
    "rounds":
        HelpData(
            description="Number of Miller-Rabin rounds.",
            format=int,
            default=20,
        ),
}

needs = {
    "keygen": ("digits",),
    "encrypt": ("modulus", "exponent", "message"),
    "decrypt": ("modulus", "private_exponent", "ciphertext"),
    "isprime": ("candidate", "rounds"),
}


def _add(parser: argparse.ArgumentParser, arg: str, *flags: str) -> None:
    parser.add_argument(f"--{arg.replace('_', '-')}", *flags, dest=arg, type=help_dict[arg].format,
                        help=help_dict[arg].description)


modulus = argparse.ArgumentParser(add_help=False)
_add(modulus, "modulus", "-m")
corep = argparse.ArgumentParser(prog="rsacore")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsacore.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--seed", type=int, help="Seed the random source, for reproducible runs. Unsecure!")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", help=help_dict["keygen"].description)
_add(keygen, "digits", "-d")
encrypt = commands.add_parser("encrypt", parents=[modulus], help=help_dict["encrypt"].description)
_add(encrypt, "exponent", "-e")
_add(encrypt, "message")
decrypt = commands.add_parser("decrypt", parents=[modulus], help=help_dict["decrypt"].description)
_add(decrypt, "private_exponent", "-d")
_add(decrypt, "ciphertext", "-c")
isprime = commands.add_parser("isprime", help=help_dict["isprime"].description)
_add(isprime, "candidate", "-c")
_add(isprime, "rounds", "-r")


def checkmodes(arg: str, non_interactive: bool):
    helper_data = help_dict[arg]
    if non_interactive and helper_data.default is not None:
        return helper_data.default
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    for choice in helper_data.choices:
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}")
        else:
            prntr(choice)
    while True:
        ch = input(f"{arg}: ")
        if ch in helper_data.choices:
            return ch
        prntr("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def fail(text: str) -> typing.NoReturn:
    """Report an error on stderr and exit with status 1."""
    print(text, file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    quiet = args.non_interactive

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not quiet:
            print(text)

    pspr("Welcome to RSA Core!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", quiet, pspr)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            setattr(args, reqs, input_handler(reqs, quiet, pspr))
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    rng = random.Random(args.seed) if args.seed is not None else None
    pspr("\nInput Complete! Executing...")
    match args.subcommand:
        case "keygen":
            try:
                pub, priv = rsacore.gen_keys(args.digits, rng)
            except ValueError as exc:
                fail(f"Key generation failed: {exc}")
            pspr("Modulus:")
            print(pub.mod)
            pspr("Public exponent:")
            print(pub.expo)
            pspr("Private exponent:")
            print(priv.expo)
        case "encrypt":
            pub = rsacore.PublicKey(args.modulus, args.exponent)
            if not 0 <= args.message < pub.mod:
                fail("Message representative must be in range [0, modulus-1]!")
            warnings.warn("Textbook RSA is unpadded and unsecure! Please use with care.", RuntimeWarning)
            pspr("Ciphertext:")
            print(rsacore.encrypt(pub, args.message))
        case "decrypt":
            pub = rsacore.PublicKey(args.modulus, rsacore.PUBLIC_EXPONENT)
            priv = rsacore.PrivateKey(args.private_exponent)
            pspr("Cleartext:")
            print(rsacore.decrypt(pub, priv, args.ciphertext))
        case "isprime":
            if args.candidate < 5:
                fail("Candidate must be at least 5.")
            if rsacore.is_probable_prime(args.candidate, args.rounds, rng):
                print(f"{args.candidate} is probably prime.")
            else:
                print(f"{args.candidate} is composite.")
    pspr("Thank you for using RSA Core!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
