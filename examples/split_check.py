import logging
import random

from switchable.services.splitter import NoItemsError, Splitter


def _summarize(picks):
    counts = {}
    for payload in picks:
        counts[payload] = counts.get(payload, 0) + 1
    return counts


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s")

    splitter = Splitter(
        [
            {"object": "control", "split": 50},
            {"object": "red", "split": 30, "params": {"color": "#f00"}},
            {"object": "blue", "split": 20, "params": {"color": "#00f"}},
        ],
        rng=random.Random(42),
    )

    for item in splitter.calculate_split_ranges():
        print(f"  {item.payload:<8} [{item.low_range:6.2f}, {item.high_range:6.2f}]  weight={item.weight}")

    n_picks = 10000
    counts = _summarize(splitter.pick().payload for _ in range(n_picks))
    print("Observed shares")
    for payload, count in sorted(counts.items(), key=lambda kv: -kv[1]):
        print(f"  {payload:<8} {count / n_picks:.3f}")
    print(f"  last selected: {splitter.last_selected.payload}")

    # weights that leave part of [0, 100] uncovered go through the uniform fallback
    partial = Splitter([("A", 20), ("B", 20)], rng=random.Random(7))
    print("Partial coverage:", _summarize(partial.pick().payload for _ in range(1000)))

    try:
        Splitter().pick()
    except NoItemsError as e:
        print("Empty splitter:", e)


if __name__ == "__main__":
    main()
