from __future__ import annotations

import logging

from cents_money import M, Money, MoneyError


logger = logging.getLogger(__name__)


def run() -> None:
    # Literals from trusted input: M(...) raises on a malformed string
    price = M("10.00 USD")
    shipping = M("4.99 USD")
    total = price + shipping
    logger.info(f"Total: {total} ({total.cents} cents), debug form: {total!r}")

    # Untrusted input: parse returns the failure as data
    for text in ["12 EUR", "12.5 EUR", "12.50 EURO", "twelve EUR"]:
        result = Money.parse(text)
        if result.is_ok:
            logger.info(f"Parsed '{text}' as {result.money}")
        else:
            logger.info(f"Rejected '{text}': {result.error.value}")

    # Adding different currencies is refused
    try:
        total + M("1.00 EUR")
    except MoneyError as e:
        logger.info(f"Cannot add: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
