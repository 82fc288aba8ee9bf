import json
import os
import tempfile
import unittest

from wordtrie import (EmptyInputError, TrieError, Trie, WordListError, load_file,
                      parse_word_list, read_word_list)


class TestReadWordList(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_json_array(self):
        path = self.write("dict.json", json.dumps(["copy", "Copper", "work"]))
        self.assertEqual(read_word_list(path), ["copy", "Copper", "work"])

    def test_text_lines(self):
        path = self.write("dict.txt", "copy\n  copper \n\nwork\n")
        self.assertEqual(read_word_list(path), ["copy", "copper", "work"])

    def test_missing_file(self):
        with self.assertRaises(WordListError) as ctx:
            read_word_list(os.path.join(self.tmp.name, "dict_does_not_exist.json"))
        self.assertIn("cannot read", str(ctx.exception))

    def test_bad_json(self):
        path = self.write("dict.bad.json", '["copy", "copper"')
        with self.assertRaises(WordListError) as ctx:
            read_word_list(path)
        self.assertIn("cannot unmarshal", str(ctx.exception))

    def test_json_not_array(self):
        path = self.write("dict.json", json.dumps({"words": ["copy"]}))
        with self.assertRaises(WordListError):
            read_word_list(path)

    def test_json_non_string_entry(self):
        path = self.write("dict.json", json.dumps(["copy", 42]))
        with self.assertRaises(WordListError) as ctx:
            read_word_list(path)
        self.assertIn("entry 1", str(ctx.exception))

    def test_word_list_error_is_not_a_trie_error(self):
        self.assertFalse(issubclass(WordListError, TrieError))


class TestParseWordList(unittest.TestCase):
    def test_json_text(self):
        self.assertEqual(parse_word_list('["copy", "Work"]', "upload.JSON"), ["copy", "Work"])

    def test_plain_text(self):
        self.assertEqual(parse_word_list("copy\r\n\n work \n", "upload.txt"), ["copy", "work"])

    def test_json_non_string_entry_names_source(self):
        with self.assertRaises(WordListError) as ctx:
            parse_word_list('["copy", null]', "upload.json")
        self.assertIn("entry 1 in upload.json", str(ctx.exception))

    def test_bad_json(self):
        with self.assertRaises(WordListError):
            parse_word_list("{", "upload.json")

    def test_empty_text_logs_warning(self):
        with self.assertLogs("wordtrie", level="WARNING"):
            self.assertEqual(parse_word_list("\n\n", "upload.txt"), [])


class TestLoadFile(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_loads_into_trie(self):
        path = self.write("dict.json", json.dumps(["copy", "copper", "workflow", "work"]))
        trie = Trie()
        with self.assertLogs("wordtrie", level="INFO"):
            n = load_file(trie, path)
        self.assertEqual(n, 4)
        self.assertEqual(trie.count(), 4)
        self.assertTrue(trie.find("COPPER"))
        self.assertEqual(trie.is_contained("1copper", 3), (True, "copper"))

    def test_empty_array_propagates_trie_error(self):
        path = self.write("dict.json", "[]")
        with self.assertRaises(EmptyInputError):
            load_file(Trie(), path)

    def test_decode_error_leaves_trie_untouched(self):
        path = self.write("dict.bad.json", "not json")
        trie = Trie()
        with self.assertRaises(WordListError):
            load_file(trie, path)
        self.assertEqual(trie.count(), 0)
        self.assertEqual(trie.count_nodes(), 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
