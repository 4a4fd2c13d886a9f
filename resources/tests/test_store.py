import json
import tempfile
from pathlib import Path

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from resources import store
from resources.dataclasses import Resource
from resources.factories import ResourceFactory


class LoadSaveTests(SimpleTestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.path = Path(self.tmpdir.name) / "resources.json"

    def write(self, content):
        self.path.write_text(content, encoding="utf-8")

    def test_load_missing_file(self):
        self.assertEqual(store.load(self.path), ())

    def test_save_and_load(self):
        original = (Resource(url="https://example.com", description=None),)
        store.save(self.path, original)
        self.assertEqual(store.load(self.path), original)

    def test_round_trip_preserves_order(self):
        original = tuple(ResourceFactory.build_batch(3)) + (
            Resource(url="https://example.com/no-description"),
        )
        store.save(self.path, original)
        self.assertEqual(store.load(self.path), original)

    def test_round_trip_accepts_any_absolute_url(self):
        original = (
            Resource(url="https://foo", description=None),
            Resource(url="https://a", description="single label host"),
            Resource(url="mailto:someone@example.com", description=None),
        )
        store.save(self.path, original)
        self.assertEqual(store.load(self.path), original)

    def test_save_format(self):
        store.save(
            self.path,
            (Resource(url="https://example.com", description="Ünïcode"),),
        )
        self.assertEqual(
            self.path.read_text(encoding="utf-8"),
            '[\n  {\n    "url": "https://example.com",\n'
            '    "description": "Ünïcode"\n  }\n]',
        )

    def test_save_overwrites(self):
        store.save(self.path, tuple(ResourceFactory.build_batch(5)))
        store.save(self.path, ())
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")), [])
        self.assertEqual(store.load(self.path), ())

    def test_load_invalid_json(self):
        self.write("[{")
        with self.assertRaises(ValidationError) as context:
            store.load(self.path)
        self.assertIn("not valid JSON", context.exception.messages[0])

    def test_load_invalid_utf8(self):
        self.path.write_bytes(b'[{"url": "https://example.com", "description": "\xff"}]')
        with self.assertRaises(ValidationError) as context:
            store.load(self.path)
        self.assertIn("not valid JSON", context.exception.messages[0])

    def test_load_not_a_list(self):
        self.write('{"url": "https://example.com", "description": null}')
        with self.assertRaises(ValidationError) as context:
            store.load(self.path)
        self.assertIn("Expected a list of resources.", context.exception.messages[0])

    def test_load_invalid_url(self):
        self.write('[{"url": "not a url", "description": null}]')
        with self.assertRaises(ValidationError) as context:
            store.load(self.path)
        self.assertIn("Resource 0", context.exception.messages[0])

    def test_load_invalid_description(self):
        self.write(
            '[{"url": "https://example.com", "description": null},'
            ' {"url": "https://example.com", "description": 5}]'
        )
        with self.assertRaises(ValidationError) as context:
            store.load(self.path)
        self.assertIn("Resource 1", context.exception.messages[0])


class TransformTests(SimpleTestCase):
    def setUp(self):
        self.resources = tuple(ResourceFactory.build_batch(3))

    def test_add_and_remove(self):
        added = store.add((), Resource(url="https://foo", description=None))
        self.assertEqual(len(added), 1)
        self.assertEqual(store.remove_at(added, 0), ())

    def test_add_appends(self):
        resource = ResourceFactory.build()
        added = store.add(self.resources, resource)
        self.assertEqual(len(added), len(self.resources) + 1)
        self.assertEqual(added[: len(self.resources)], self.resources)
        self.assertEqual(added[-1], resource)

    def test_remove_at_keeps_order(self):
        first, second, third = self.resources
        self.assertEqual(store.remove_at(self.resources, 0), (second, third))
        self.assertEqual(store.remove_at(self.resources, 1), (first, third))
        self.assertEqual(store.remove_at(self.resources, 2), (first, second))

    def test_replace_at(self):
        updated = store.replace_at(
            (Resource(url="https://foo", description=None),),
            0,
            Resource(url="https://bar", description=None),
        )
        self.assertEqual(updated[0].url, "https://bar")

    def test_replace_at_keeps_other_positions(self):
        resource = ResourceFactory.build()
        updated = store.replace_at(self.resources, 1, resource)
        self.assertEqual(updated, (self.resources[0], resource, self.resources[2]))

    def test_inputs_are_not_mutated(self):
        resources = list(self.resources)
        store.add(resources, ResourceFactory.build())
        store.remove_at(resources, 0)
        store.replace_at(resources, 0, ResourceFactory.build())
        self.assertEqual(tuple(resources), self.resources)

    def test_is_valid_index(self):
        self.assertTrue(store.is_valid_index(self.resources, 0))
        self.assertTrue(store.is_valid_index(self.resources, 2))
        self.assertFalse(store.is_valid_index(self.resources, 3))
        self.assertFalse(store.is_valid_index(self.resources, -1))
        self.assertFalse(store.is_valid_index((), 0))
