"""Tests for the file-backed editor host."""

import pytest

from smartdoc.editor import Selection, insert_doc, parse_line_range, read_selection

ROUTES = "const router = express.Router();\n\nrouter.get('/users/:id', async (req, res) => {\n  res.json(await req.userService.getUser(req.params.id));\n});\n"


class TestParseLineRange:
    def test_none_selects_everything(self):
        assert parse_line_range(None) == (1, None)

    def test_range(self):
        assert parse_line_range("3:5") == (3, 5)

    def test_open_end(self):
        assert parse_line_range("3:") == (3, None)

    def test_single_line(self):
        assert parse_line_range("4") == (4, 4)

    @pytest.mark.parametrize("spec", ["a:b", "0:2", "5:3", "x"])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            parse_line_range(spec)


class TestReadSelection:
    def test_lines(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_text(ROUTES, encoding="utf-8")
        text = read_selection(Selection(path, 3, 5))
        assert text.startswith("router.get(")
        assert text.endswith("});\n")

    def test_whole_file(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_text(ROUTES, encoding="utf-8")
        assert read_selection(Selection(path)) == ROUTES

    def test_start_past_end(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_text(ROUTES, encoding="utf-8")
        with pytest.raises(ValueError):
            read_selection(Selection(path, 50, 60))


class TestInsertDoc:
    def test_inserts_above_selection(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_text(ROUTES, encoding="utf-8")
        insert_doc(Selection(path, 3, 5), "/**\n * GET /users/{id}\n */")
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[2:5] == ["/**", " * GET /users/{id}", " */"]
        assert lines[5].startswith("router.get(")
        assert lines[0] == "const router = express.Router();"

    def test_insert_at_end_without_trailing_newline(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_text("a\nb", encoding="utf-8")
        insert_doc(Selection(path, 3), "/** x */")
        assert path.read_text(encoding="utf-8") == "a\nb\n/** x */\n"

    def test_keeps_crlf_line_endings(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_bytes(b"a\r\nb\r\nc\r\n")
        insert_doc(Selection(path, 2, 2), "/**\n * x\n */")
        assert path.read_bytes() == b"a\r\n/**\r\n * x\r\n */\r\nb\r\nc\r\n"

    def test_unicode_separators_are_not_line_breaks(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_text("const s = 'a\u2028b';\nrouter.get();\n", encoding="utf-8")
        insert_doc(Selection(path, 2, 2), "/** x */")
        assert path.read_text(encoding="utf-8") == "const s = 'a\u2028b';\n/** x */\nrouter.get();\n"


class TestLineNumbering:
    def test_form_feed_does_not_split_lines(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_text("a\x0cz\nb\nc\n", encoding="utf-8")
        assert read_selection(Selection(path, 2, 2)) == "b\n"

    def test_crlf_selection_keeps_endings(self, tmp_path):
        path = tmp_path / "routes.js"
        path.write_bytes(b"a\r\nreq.users.get(id)\r\nc\r\n")
        assert read_selection(Selection(path, 2, 2)) == "req.users.get(id)\r\n"
