import pytest

from symdoc.parsers import SymbolGraphDirectoryError, SymbolGraphLoader, SymbolGraphParseError


class TestDiscoverModules:
    def test_lists_main_files_only(self, write_graph, graph_dict):
        write_graph("Beta.symbols.json", graph_dict("Beta", []))
        write_graph("Alpha.symbols.json", graph_dict("Alpha", []))
        write_graph("Alpha@Swift.symbols.json", graph_dict("Alpha", []))
        write_graph("notes.txt", "ignored")

        loader = SymbolGraphLoader(write_graph.directory)
        assert loader.discover_modules() == ["Alpha", "Beta"]

    def test_missing_directory_raises(self, temp_dir):
        loader = SymbolGraphLoader(temp_dir / "nope")
        with pytest.raises(SymbolGraphDirectoryError):
            loader.discover_modules()


class TestLoadModule:
    def test_merges_fragments_in_file_name_order(self, write_graph, graph_dict, symbol_dict):
        write_graph("Demo.symbols.json", graph_dict("Demo", [
            symbol_dict("s:4Demo1AV", "swift.struct", ["A"]),
        ]))
        write_graph("Demo@Swift.symbols.json", graph_dict("Demo", [
            symbol_dict("s:SS4DemoE1yyF", "swift.method", ["String", "y()"]),
        ], [("memberOf", "s:SS4DemoE1yyF", "s:SS")]))
        write_graph("Demo@Foundation.symbols.json", graph_dict("Demo", [
            symbol_dict("s:10Foundation4DataV4DemoE1xyF", "swift.method", ["Data", "x()"]),
        ]))

        document = SymbolGraphLoader(write_graph.directory).load_module("Demo")

        titles = [s.title for s in document.symbols]
        assert titles == ["A", "x()", "y()"]
        assert len(document.relationships) == 1

    def test_bad_fragment_is_skipped(self, write_graph, graph_dict, symbol_dict):
        write_graph("Demo.symbols.json", graph_dict("Demo", [
            symbol_dict("s:4Demo1AV", "swift.struct", ["A"]),
        ]))
        write_graph("Demo@Broken.symbols.json", "{ nope")

        document = SymbolGraphLoader(write_graph.directory).load_module("Demo")
        assert len(document.symbols) == 1

    def test_non_utf8_fragment_is_skipped(self, write_graph, graph_dict, symbol_dict):
        write_graph("Demo.symbols.json", graph_dict("Demo", [
            symbol_dict("s:4Demo1AV", "swift.struct", ["A"]),
        ]))
        write_graph("Demo@Swift.symbols.json", b'{"x": "\xff\xfe"}')

        document = SymbolGraphLoader(write_graph.directory).load_module("Demo")
        assert [s.title for s in document.symbols] == ["A"]

    def test_non_utf8_main_file_raises_parse_error(self, write_graph):
        write_graph("Demo.symbols.json", b'\xff\xfe')
        with pytest.raises(SymbolGraphParseError) as exc_info:
            SymbolGraphLoader(write_graph.directory).load_module("Demo")
        assert "Demo.symbols.json" in str(exc_info.value)

    def test_missing_main_file_raises(self, write_graph):
        with pytest.raises(SymbolGraphParseError):
            SymbolGraphLoader(write_graph.directory).load_module("Ghost")

    def test_invalid_main_file_names_the_file(self, write_graph):
        write_graph("Demo.symbols.json", "[]")
        with pytest.raises(SymbolGraphParseError) as exc_info:
            SymbolGraphLoader(write_graph.directory).load_module("Demo")
        assert "Demo.symbols.json" in str(exc_info.value)
