"""Tests for the xtype command line."""

import json

from xtype.cli import main, render_tree


class TestRenderTree:
    """Tests for render_tree."""

    def test_single_tree(self):
        """A single tree should render to markup."""
        markup = render_tree({
            "xtype": "svg",
            "attributes": {"width": "20"},
            "children": [{"xtype": "circle", "attributes": {"r": "5"}}],
        })
        assert markup == (
            '<svg xmlns="http://www.w3.org/2000/svg" width="20"><circle r="5"/></svg>'
        )

    def test_list_of_trees(self):
        """A list of trees should render one after another."""
        markup = render_tree([{"xtype": "rect"}, {"xtype": "line"}])
        assert markup.count("xmlns=") == 2
        assert "<rect" in markup and "<line" in markup

    def test_extra_tags(self):
        """Extra tables should be installed for the render."""
        assert render_tree({"xtype": "div"}, tags=["html"]).startswith("<div")


class TestMain:
    """Tests for the main entry point."""

    def test_render_yaml_to_stdout(self, tmp_path, capsys):
        """render should print markup for a YAML tree."""
        tree = tmp_path / "tree.yaml"
        tree.write_text("xtype: g\nchildren:\n  - xtype: rect\n    attributes: {width: 10}\n")
        assert main(["render", str(tree)]) == 0
        assert '<rect width="10"/>' in capsys.readouterr().out

    def test_render_json_to_file(self, tmp_path):
        """render should write markup to the output file."""
        tree = tmp_path / "tree.json"
        tree.write_text(json.dumps({"xtype": "text", "content": "hello"}))
        out = tmp_path / "out.svg"
        assert main(["render", str(tree), "-o", str(out)]) == 0
        assert ">hello</text>" in out.read_text()

    def test_missing_tree_fails(self, tmp_path):
        """A missing tree file should exit with 1."""
        assert main(["render", str(tmp_path / "missing.yaml")]) == 1

    def test_strict_config_fails_on_unknown_tag(self, tmp_path):
        """Strict mode should fail on an unknown tag."""
        tree = tmp_path / "tree.yaml"
        tree.write_text("xtype: hexagon\n")
        config = tmp_path / "engine.json"
        config.write_text(json.dumps({"strict": True}))
        assert main(["render", str(tree), "-c", str(config)]) == 1
