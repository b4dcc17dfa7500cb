"""
Item and packed-item value types shared by all solvers.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import functools
import numbers
from fractions import Fraction

from pyknap.common import IncomparableItemError

def _natural(name, value):
    if isinstance(value, bool) or \
       (not isinstance(value, numbers.Integral)):
        raise ValueError("Item %s must be an integer, not %r"
                         % (name, value))
    value = int(value)
    if value < 0:
        raise ValueError("Item %s must be non-negative, not %s"
                         % (name, value))
    return value

@functools.total_ordering
class Item(object):
    """An object with a unique id, a profit, and a weight
    that can be put into a knapsack.

    Items are immutable. They are ordered by their
    weight/profit ratio (lowest first, i.e., the most
    valuable item per unit of weight comes first), with ties
    broken by id. The ratio is an exact rational number, so
    the order is total and reproducible.

    Parameters
    ----------
    id : int
        A non-negative identifier, unique within a problem
        instance.
    profit : int
        How much value the item provides (non-negative).
    weight : int
        How much capacity the item takes up (non-negative).

    Note
    ----
    An item with zero profit is a valid value, but it has no
    ratio. Comparing it with another item raises
    :class:`IncomparableItemError
    <pyknap.common.IncomparableItemError>`.
    """
    __slots__ = ("id",
                 "profit",
                 "weight")

    def __init__(self, id, profit, weight):
        object.__setattr__(self, "id", _natural("id", id))
        object.__setattr__(self, "profit",
                           _natural("profit", profit))
        object.__setattr__(self, "weight",
                           _natural("weight", weight))

    def __setattr__(self, name, value):
        raise AttributeError("Item objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Item objects are immutable")

    def __reduce__(self):
        return (Item, (self.id, self.profit, self.weight))

    @property
    def comparable(self):
        """Whether or not this item has a defined ratio."""
        return self.profit > 0

    @property
    def ratio(self):
        """The exact weight/profit ratio. The lower the
        ratio, the better the item."""
        if self.profit == 0:
            raise IncomparableItemError(self)
        return Fraction(self.weight, self.profit)

    def sort_key(self):
        """The key that defines the item order."""
        return (self.ratio, self.id)

    def as_item(self):
        return self

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return (self.id, self.profit, self.weight) == \
            (other.id, other.profit, other.weight)

    def __lt__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self):
        return hash((self.id, self.profit, self.weight))

    def __repr__(self):
        return ("Item(id=%s, profit=%s, weight=%s)"
                % (self.id, self.profit, self.weight))

class PackedItem(object):
    """An :class:`Item` placed inside a knapsack, together
    with the portion of it that was taken.

    Parameters
    ----------
    item : :class:`Item`
        The original item.
    take_portion : :class:`fractions.Fraction`
        The portion of the item in the knapsack, in the
        interval (0, 1].
    """
    __slots__ = ("item",
                 "take_portion")

    def __init__(self, item, take_portion=1):
        take_portion = Fraction(take_portion)
        if not (0 < take_portion <= 1):
            raise ValueError("take_portion must be in (0, 1], "
                             "not %s" % (take_portion))
        object.__setattr__(self, "item", item)
        object.__setattr__(self, "take_portion", take_portion)

    def __setattr__(self, name, value):
        raise AttributeError("PackedItem objects are immutable")

    @property
    def effective_weight(self):
        """The weight of the item scaled by the portion
        taken."""
        return self.item.weight * self.take_portion

    @property
    def effective_profit(self):
        """The profit of the item scaled by the portion
        taken."""
        return self.item.profit * self.take_portion

    def __eq__(self, other):
        if not isinstance(other, PackedItem):
            return NotImplemented
        return (self.item == other.item) and \
            (self.take_portion == other.take_portion)

    def __hash__(self):
        return hash((self.item, self.take_portion))

    def __repr__(self):
        return ("PackedItem(item=%r, take_portion=%s)"
                % (self.item, self.take_portion))

def as_item(obj):
    """Returns an :class:`Item` view of the given object.

    Accepted are :class:`Item` objects (returned as is),
    objects that define an ``as_item()`` method, and
    mappings with ``id``, ``profit`` and ``weight`` keys
    (e.g., rows of a CSV file).

    Example
    -------

    >>> as_item({"id": "3", "profit": 10, "weight": 40})
    Item(id=3, profit=10, weight=40)
    """
    if isinstance(obj, Item):
        return obj
    convert = getattr(obj, "as_item", None)
    if convert is not None:
        item = convert()
        if not isinstance(item, Item):
            raise TypeError("%s.as_item() returned %s, not Item"
                            % (type(obj).__name__,
                               type(item).__name__))
        return item
    try:
        keys = obj.keys()
    except AttributeError:
        raise TypeError("Object of type %s can not be converted "
                        "to an Item" % (type(obj).__name__))
    missing = [key for key in ("id", "profit", "weight")
               if key not in keys]
    if missing:
        raise ValueError("Item mapping is missing key(s): %s"
                         % (", ".join(missing)))
    return Item(_to_int(obj["id"]),
                _to_int(obj["profit"]),
                _to_int(obj["weight"]))

def _to_int(value):
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError("invalid integer value: %r" % (value))
    return value

def as_items(objs):
    """Returns a list of :class:`Item` views for the given
    objects (see :func:`as_item`)."""
    return [as_item(obj) for obj in objs]

def check_comparable(items):
    """Raises :class:`IncomparableItemError
    <pyknap.common.IncomparableItemError>` for the first item
    with zero profit."""
    for item in items:
        if not item.comparable:
            raise IncomparableItemError(item)

def sorted_by_ratio(items):
    """Returns a new list with the items sorted ascending by
    their weight/profit ratio (ties broken by id).

    Raises
    ------
    IncomparableItemError
        If any item has zero profit. All items are checked
        before sorting begins.
    """
    check_comparable(items)
    return sorted(items, key=Item.sort_key)

def total_profit(items):
    """The summed profit of a 0/1 selection."""
    return sum(item.profit for item in items)

def total_weight(items):
    """The summed weight of a 0/1 selection."""
    return sum(item.weight for item in items)

def packed_profit(packed):
    """The summed effective profit of a list of
    :class:`PackedItem` objects."""
    return sum((p.effective_profit for p in packed), Fraction(0))

def packed_weight(packed):
    """The summed effective weight of a list of
    :class:`PackedItem` objects."""
    return sum((p.effective_weight for p in packed), Fraction(0))
