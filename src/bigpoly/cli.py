import argparse
import random

from pymcl import r as ρ

from .poly import Poly
from .shamir import genshares
from .types import InexactDivisionError, NotPrimeError


class StorePoly(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        try:
            coeffs = [int(v, 0) for v in values.split(",")]
        except ValueError:
            parser.error("invalid polynomial {!r}, expected comma-separated coefficients like 1,2,0,3".format(values))
        setattr(namespace, self.dest, Poly(*coeffs))


def modulus(value):
    m = int(value, 0)
    if m <= 0:
        raise argparse.ArgumentTypeError("modulus must be positive, got {}".format(value))
    return m


def main(argv=None):
    parser = argparse.ArgumentParser(description="bigpoly: Big Integer Polynomial Arithmetic and Shamir Share Generation")

    subparsers = parser.add_subparsers(dest="command", required=True, help="sub-command")

    parsers_binary = {}
    for command, text in [
        ("add", "add two polynomials"),
        ("sub", "subtract the second polynomial from the first"),
        ("mul", "multiply two polynomials"),
        ("div", "divide the first polynomial by the second, printing quotient and remainder"),
        ("gcd", "greatest common divisor of two polynomials"),
    ]:
        parser_binary = subparsers.add_parser(command, help=text, description=text.capitalize() + ".")
        parser_binary.add_argument("p", type=str, action=StorePoly, help="coefficients of the first polynomial, lowest order first (e.g. 1,2,0,3)")
        parser_binary.add_argument("q", type=str, action=StorePoly, help="coefficients of the second polynomial, lowest order first")
        parser_binary.add_argument("-m", "--modulus", type=modulus, default=None, help="reduce coefficients modulo this number (default: none)")
        parsers_binary[command] = parser_binary

    parser_eval = subparsers.add_parser("eval", help="evaluate a polynomial", description="Evaluate a polynomial at a point.")
    parser_eval.add_argument("p", type=str, action=StorePoly, help="coefficients of the polynomial, lowest order first")
    parser_eval.add_argument("x", type=lambda v: int(v, 0), help="the point to evaluate at")
    parser_eval.add_argument("-m", "--modulus", type=modulus, default=None, help="reduce modulo this number (default: none)")

    parser_shares = subparsers.add_parser("shares", help="generate shares", description="Generate a random polynomial of degree K - 1 over GF(Q) and N shares of it.")
    parser_shares.add_argument("n", type=int, help="number of shares")
    parser_shares.add_argument("k", type=int, help="number of shares needed to recover the polynomial")
    parser_shares.add_argument("-q", "--prime", type=lambda v: int(v, 0), default=ρ, help="order of the prime field (default: the BLS12-381 scalar field order)")
    parser_shares.add_argument("-s", "--seed", type=int, default=None, help="seed for the random number generator (default: unseeded)")

    args = parser.parse_args(argv)

    try:
        if args.command == "add":
            print(args.p.add(args.q, args.modulus))

        elif args.command == "sub":
            print(args.p.sub(args.q, args.modulus))

        elif args.command == "mul":
            print(args.p.mul(args.q, args.modulus))

        elif args.command == "div":
            quo, rem = args.p.divmod(args.q, args.modulus)
            print("Quotient:", quo)
            print("Remainder:", rem)

        elif args.command == "gcd":
            print(args.p.gcd(args.q, args.modulus))

        elif args.command == "eval":
            print(args.p.eval(args.x, args.modulus))

        elif args.command == "shares":
            rng = random.Random(args.seed) if args.seed is not None else None
            print("Generating {} shares with threshold {} over GF({})...".format(args.n, args.k, args.prime))
            shares, poly = genshares(args.n, args.k, args.prime, rng)
            print("Polynomial:", poly)
            for x, y in shares:
                print("Share: ({}, {})".format(x, y))

    except InexactDivisionError as e:
        parsers_binary[args.command].error(str(e))
    except NotPrimeError as e:
        parser_shares.error(str(e))
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
