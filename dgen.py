'''
seeded test-record generator for the lazyq test suites.

a schema is a dict of field -> spec, where a spec is one of:
  'word'                                   a faker provider name
  ('pyint', {'min_value': 1})              a faker provider with kwargs
  choice([...])                            one of the listed values
  ref('field', fmt=None)                   an already generated sibling field
  [{'_gen_items': {...}, '_gen_count': n}] a nested list of records
anything else is used literally.
'''

import numpy as np
from faker import Faker
from lazyq import from_iterable, Enumerable
from typing import Any, Dict, Optional, Sequence


def choice(values: Sequence[Any]) -> Dict[str, Any]:
    return {'_gen': 'choice', 'from': list(values)}


def ref(key: str, fmt: Optional[str] = None) -> Dict[str, Any]:
    return {'_gen': 'ref', 'key': key, 'format': fmt}


class Generator:
    """walks a schema and fills it with fake values."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _fake_value(self, provider: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, provider)
        except AttributeError:
            raise ValueError(f"faker has no provider '{provider}'") from None
        return method(**(kwargs or {}))

    def _directive(self, spec: Dict, context: Dict) -> Any:
        kind = spec['_gen']
        if kind == 'choice':
            # numpy hands back its own scalar types, convert to plain python
            picked = spec['from'][self._rng.integers(len(spec['from']))]
            return picked.item() if hasattr(picked, 'item') else picked
        if kind == 'ref':
            if spec['key'] not in context:
                raise ValueError(f"reference to '{spec['key']}' not found in current context.")
            value = context[spec['key']]
            return spec['format'].format(value) if spec.get('format') else value
        raise ValueError(f"unknown directive: '{kind}'")

    def _count(self, spec: Dict) -> int:
        count = spec.get('_gen_count', 3)
        if isinstance(count, (list, tuple)):
            low, high = count
            return int(self._rng.integers(low, high, endpoint=True))
        return count

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}
        if isinstance(schema, dict):
            if '_gen' in schema:
                return self._directive(schema, context)
            record = {}
            for key, spec in schema.items():
                # siblings generated so far are visible to ref()
                record[key] = self.create(spec, {**context, **record})
            return record
        if isinstance(schema, list):
            if not schema: return []
            item_spec = schema[0]
            inner = item_spec.get('_gen_items', item_spec) if isinstance(item_spec, dict) else item_spec
            count = self._count(item_spec) if isinstance(item_spec, dict) else 3
            return [self.create(inner, context) for _ in range(count)]
        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._fake_value(schema[0], schema[1])
        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._fake_value(schema)
        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        """generate count records up front and wrap them in a re-iterable enumerable"""
        records = [self._generator.create(self._schema) for _ in range(count)]
        return from_iterable(records)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
