"""Demonstrates lets, named subjects and calling an enclosing definition."""

import lazylet


class Cart:
    def __init__(self, items: list[str] | None = None) -> None:
        self.items = list(items or [])


carts = lazylet.describe(Cart)


@carts.let
def items() -> list[str]:
    return ["apple"]


@carts.subject("cart")
def make_cart(ex) -> Cart:
    return Cart(ex.items)


@carts.it("holds the declared items")
def _(ex) -> None:
    ex.is_expected.to(lambda cart: cart.items == ["apple"])


with_pear = carts.describe("with a pear added")


@with_pear.let("items")
def items_with_pear(ex) -> list[str]:
    """Builds on the enclosing group's items instead of repeating them."""
    return ex.upcall() + ["pear"]


@with_pear.it("holds both items")
def _(ex) -> None:
    assert ex.cart.items == ["apple", "pear"]
    assert ex.subject is ex.cart


@with_pear.before_all
def warm_up(ex) -> None:
    """Group-level setup; reading a let here raises WrongPhaseAccess."""


if __name__ == "__main__":
    result = lazylet.run([carts])
    raise SystemExit(0 if result.ok else 1)
