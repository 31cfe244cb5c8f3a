# fieacore

fieacore provides small building blocks for a data-driven game engine. It has no dependencies outside the standard library.

## Modules

- `fieacore.slist`
  - `SList` is a singly linked list. It tracks its front, back and size.
  - It supports `push_front`, `push_back`, `pop_front`, `pop_back`, `front`, `back`, `is_empty`, `clear`, `find`, `insert_after`, `remove` and `remove_at`.
  - `begin()` and `end()` return cursors.
  - `find` and `remove` accept an optional equality function.
- `fieacore.slist_node`
  - `Node` is a single link of the list.
  - `Cursor` is a position in a list. Read it with `value()` and move it with `advance()`.
  - A cursor at the end has no node. Calling `value()` on it raises `RuntimeError`.
  - An unattached cursor cannot be advanced and raises `RuntimeError`.
- `fieacore.hashmap`
  - `HashMap` is a separately chained hash map. It keeps the bucket count it was given, 11 by default, until you call `resize()`.
  - `resize()` raises `ValueError` when asked to shrink.
  - The hash function and key-equality function can be replaced.
  - Lookup:
    - `find(key)` returns the stored `(key, value)` pair or `None`.
    - `at(key)` and `map[key]` raise `KeyError` when the key is missing.
  - Insertion:
    - `insert(key, value)` returns the stored value and whether the insertion happened. An existing key is left unchanged.
    - `setdefault(key, default)` inserts `default` when the key is absent and returns the stored value.
    - `map[key] = value` inserts the key or overwrites its value.
  - `HashMap.from_pairs(pairs)` builds a map with one bucket per pair.
  - Other members: `remove`, `clear`, `bucket_count()`, `load_factor()` (the fraction of buckets in use), `items()`, `len()`, `in`, and iteration over the keys.
- `fieacore.hashmap_cursor`
  - `HashMapCursor` is a position within a `HashMap`.
  - Obtain one with `HashMapCursor.begin(map)` or `HashMapCursor.end(map)`, then use `value()` and `advance()`.
- `fieacore.datum_types`
  - `DatumType` is the enumeration of value kinds: `BOOLEAN`, `INTEGER`, `FLOAT`, `STRING`, `VECTOR`, `MATRIX`, `POINTER`, `TABLE_POINTER`, `TABLE` and `UNKNOWN`.
  - `datum_type_from_name()` maps the names `"bool"`, `"integer"`, `"float"`, `"string"`, `"vector"`, `"matrix"`, `"pointer"`, `"rawtable"`, `"table"` and `"unknown"` to these values. It raises `ValueError` for any other name.
  - The same mapping is available read-only as `DATUM_TYPE_NAMES`.
- `fieacore.rtti`
  - `RTTI` is a base class providing `type_name()`, `is_a()`, `as_type()` and `equals()`.
  - `==` on two `RTTI` objects goes through `equals()`. The base `equals()` never matches.
  - `rtti_equality(lhs, rhs)` compares two objects that may be `None`.
- `fieacore.factory`
  - `Factory` is the abstract base. It has `create()` and `class_name()`.
  - `concrete_factory(cls)` makes a factory that default-constructs `cls` and is named after it.
  - `registry_for(base)` returns the shared `FactoryRegistry` for a product type.
  - A registry has `add`, `remove`, `find`, `create`, `clear`, `len()` and `in`.
  - Adding a factory under a name that is already taken keeps the first one.
  - `create` returns `None` for an unknown class name.
- `fieacore.defaults`
  - `default_hash` sums the key's bytes, multiplied by 29, and masks the result to 64 bits. Strings are hashed as signed UTF-8 bytes.
  - `default_equality` compares with `==`.
  - `default_reserve_strategy` returns 1 for 0 and doubles any other capacity.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from fieacore.hashmap import HashMap
from fieacore.hashmap_cursor import HashMapCursor
from fieacore.slist import SList
from fieacore.factory import concrete_factory, registry_for

scores = HashMap(bucket_count=11)
scores["alice"] = 10
scores.insert("bob", 7)
assert scores.at("alice") == 10
assert "bob" in scores
scores.remove("bob")
assert len(scores) == 1

cursor = HashMapCursor.begin(scores)
assert cursor.value() == ("alice", 10)
assert cursor.advance() == HashMapCursor.end(scores)

items = SList([1, 2, 3])
items.push_front(0)
assert list(items) == [0, 1, 2, 3]
assert items.back() == 3


class Shape:
    pass


class Circle(Shape):
    pass


registry = registry_for(Shape)
registry.add(concrete_factory(Circle))
assert isinstance(registry.create("Circle"), Circle)
assert registry.create("Square") is None
```

## Errors

- `SList.front`, `back`, `pop_front` and `pop_back` raise `RuntimeError` when the list is empty.
- `SList.insert_after` raises `RuntimeError` for a cursor that belongs to another list.

## What it does not include

- `DatumType` is only a set of type tags. The package has no datum or scope containers that hold values of those types.
- It has no JSON or other serialization reader.
- It provides no command-line tool.