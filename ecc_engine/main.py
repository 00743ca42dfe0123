import logging
import os

from . import config
from . import point as pt

# ============================================================================
# DEMO CONFIGURATION
# ============================================================================

# Curve used when ECC_ENGINE_CURVE is not set ("P256", "SECP256K1" or "P521")
CURVE = "P256"

# Multiples of the generator to print
SCALARS = (2, 3, 7)

# ============================================================================


def main():
    logging.basicConfig(level=logging.INFO)

    curve = config.select_curve(os.environ.get(config.CURVE_ENV_VAR) or CURVE)
    generator = pt.Point.generator(curve)

    print("=" * 80)
    print(f"CURVE {curve.name}")
    print("=" * 80)
    print(f"a = {curve.a:x}")
    print(f"b = {curve.b:x}")
    print(f"p = {curve.p:x}")
    print(f"n = {curve.n:x}")
    print()

    print("G")
    generator.print_coordinates()
    print()

    print("G + G (doubling formula)")
    generator.double().print_coordinates()
    print()

    for scalar in SCALARS:
        print(f"{scalar} * G (double-and-add)")
        generator.multiply(scalar).print_coordinates()
        print()

    print("G + (-G)")
    generator.add(generator.negate()).print_coordinates()
    print()

    print("n * G")
    generator.multiply(curve.n).print_coordinates()


if __name__ == "__main__":
    main()
