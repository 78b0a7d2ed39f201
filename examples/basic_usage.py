"""
Basic usage example for mathdistance.
"""

from mathdistance import (
    DistanceCalculator,
    Euclidean,
    Manhattan,
    Chebyshev,
    Minkowski,
    Hamming,
    euclidean,
    hamming,
    DistanceError,
)


def main():
    print("=" * 60)
    print("mathdistance Basic Usage Example")
    print("=" * 60)

    v1 = [0, 2, 1]
    v2 = [1, 4, 5]

    # 1. Free functions
    print("\n1. Direct function calls...")
    print(f"   euclidean({v1}, {v2}) = {euclidean(v1, v2):.4f}")
    print(f"   hamming('1011101', '1001001') = {hamming('1011101', '1001001')}")

    # 2. One calculator, several algorithms
    print("\n2. Same data under every algorithm...")
    calc = DistanceCalculator(Euclidean()).set_data(v1, v2)

    for algo in (Euclidean(), Manhattan(), Chebyshev(),
                 Minkowski(3), Minkowski(2), Minkowski(1)):
        print(f"   {algo!r:<22} {calc.set_algorithm(algo).distance():.4f}")

    distance = calc.set_algorithm(Hamming()).set_data("electric", "tectonic").distance()
    print(f"   {'Hamming()':<22} {distance}")

    # 3. Error handling
    print("\n3. Invalid input...")
    for a, b in (([1, 2, 3], [1, 2, 3, 4]), ([2, "a", 6, 7], [4, 5, 1, 9])):
        try:
            euclidean(a, b)
        except DistanceError as e:
            print(f"   {type(e).__name__}: {e}")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
