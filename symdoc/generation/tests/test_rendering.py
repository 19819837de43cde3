from datetime import datetime, timedelta, timezone

from symdoc.generation import (
    InterfaceRenderer,
    ModuleStructure,
    adjust_heading_levels,
    filter_public_symbols,
    format_declaration,
    format_doc_comment,
    is_reexported_symbol,
    prepare_readme,
)
from symdoc.generation.markdown_formatter import assemble_module_document
from symdoc.names import BatchResolver, NameResolver
from symdoc.symbols import DeclarationToken, Relationship, RelationshipIndex, Symbol


def tokens(*texts):
    return tuple(DeclarationToken("text", t) for t in texts)


def sym(precise, kind, path, decl=None, doc=(), access="public"):
    path = tuple(path.split("/"))
    return Symbol(precise, kind, path, path[-1], tokens(decl) if decl else (), tuple(doc), access)


class FixedResolver(BatchResolver):
    def __init__(self, names):
        self.names = names

    def batch_resolve(self, references):
        return [self.names.get(ref) for ref in references]


class TestFormatDeclaration:
    def test_adds_public(self):
        assert format_declaration(["struct", " ", "MyStruct"], True) == "public struct MyStruct"

    def test_does_not_duplicate_public(self):
        once = format_declaration(["struct", " ", "MyStruct"], True)
        assert format_declaration([once], True) == "public struct MyStruct"

    def test_drops_actor_isolation_tokens(self):
        parts = ["@MainActor", " ", "nonisolated", " ", "func", " ", "run", "()"]
        assert format_declaration(parts, False) == "  func run()"

    def test_accepts_declaration_tokens(self):
        assert format_declaration(tokens("var", " ", "x", ": ", "Int"), True) == "public var x: Int"


class TestFormatDocComment:
    def test_prefixes_each_line(self):
        assert format_doc_comment(["Line one", "Line two"], "  ") == "  /// Line one\n  /// Line two\n"

    def test_parameters_section_is_dropped(self):
        lines = [
            "Adds two numbers.",
            "- Parameters:",
            "  - a: First",
            "  - b: Second",
            "- Note",
            "Trailing text",
        ]
        assert format_doc_comment(lines) == "/// Adds two numbers.\n/// - Note\n/// Trailing text\n"

    def test_compact_parameters_header(self):
        assert format_doc_comment(["-Parameters:", "- x: value"]) == ""

    def test_empty(self):
        assert format_doc_comment([]) == ""


class TestReexportFilter:
    def test_c_symbols_are_reexported(self):
        assert is_reexported_symbol("c:objc(cs)NSObject", "Demo")
        assert is_reexported_symbol("c:@F@strlen", "Demo")

    def test_objc_bridged_swift_symbol(self):
        assert is_reexported_symbol("s:So8NSStringC10FoundationE5countSivp", "Demo")

    def test_own_module_extension_of_bridged_type_is_kept(self):
        assert not is_reexported_symbol("s:So8NSStringC4DemoE5shoutSSyF", "Demo")

    def test_plain_swift_symbol(self):
        assert not is_reexported_symbol("s:4Demo5CacheC", "Demo")

    def test_filter_keeps_public_open_first_occurrence(self):
        symbols = [
            sym("s:4Demo1AV", "swift.struct", "A"),
            sym("s:4Demo1BC", "swift.class", "B", access="open"),
            sym("s:4Demo1CV", "swift.struct", "C", access="internal"),
            sym("s:4Demo1AV::SYNTHESIZED::x", "swift.method", "A/x()"),
            sym("c:@S@Point", "swift.struct", "Point"),
            sym("s:4Demo1AV", "swift.struct", "A2"),
        ]
        kept = filter_public_symbols(symbols, "Demo")
        assert [s.title for s in kept] == ["A", "B"]

    def test_filter_can_include_reexported(self):
        kept = filter_public_symbols([sym("c:@S@Point", "swift.struct", "Point")], "Demo",
                                     include_reexported=True)
        assert len(kept) == 1


class TestModuleStructure:
    def test_classification(self):
        structure = ModuleStructure([
            sym("1", "swift.struct", "Cache"),
            sym("2", "swift.method", "Cache/get(_:)"),
            sym("3", "swift.method", "Cache/get(_:)"),
            sym("4", "swift.method", "String/shout()"),
            sym("5", "swift.method", "String/Inner/deep()"),
        ])
        assert [s.title for s in structure.top_level] == ["Cache"]
        assert [s.precise_id for s in structure.children_of(("Cache",))] == ["2", "3"]
        assert list(structure.extension_groups) == ["String"]
        assert [s.precise_id for s in structure.extension_groups["String"]] == ["4"]
        assert structure.by_path["Cache.get(_:)"].precise_id == "2"

    def test_empty(self):
        assert ModuleStructure([]).is_empty


class TestInterfaceRenderer:
    def make_renderer(self, symbols, relationships=(), names=None):
        structure = ModuleStructure(symbols)
        resolver = NameResolver(FixedResolver(names or {}))
        return InterfaceRenderer(structure, RelationshipIndex(relationships), resolver), structure

    def test_struct_with_grouped_members(self):
        symbols = [
            sym("s", "swift.struct", "Cache", "struct Cache", doc=["A cache."]),
            sym("m2", "swift.method", "Cache/remove()", "func remove()"),
            sym("i", "swift.init", "Cache/init()", "init()"),
            sym("p", "swift.property", "Cache/count", "var count: Int"),
            sym("tp", "swift.type.property", "Cache/shared", "static var shared: Cache"),
            sym("tm", "swift.type.method", "Cache/make()", "static func make() -> Cache"),
            sym("n", "swift.enum", "Cache/Policy", "enum Policy"),
            sym("c", "swift.enum.case", "Cache/Policy/lru", "case lru"),
        ]
        renderer, structure = self.make_renderer(symbols)

        text = renderer.render_symbol(structure.top_level[0])

        assert text == (
            "/// A cache.\n"
            "public struct Cache {\n"
            "  public enum Policy {\n"
            "    public case lru\n"
            "  }\n"
            "\n"
            "  public static var shared: Cache\n"
            "\n"
            "  public var count: Int\n"
            "\n"
            "  public static func make() -> Cache\n"
            "\n"
            "  public init()\n"
            "\n"
            "  public func remove()\n"
            "}\n"
        )

    def test_inheritance_clause_skips_noise_and_duplicates(self):
        symbols = [sym("s:4Demo4LeafC", "swift.class", "Leaf", "class Leaf")]
        rels = [
            Relationship("inheritsFrom", "s:4Demo4LeafC", "s:4Demo4BaseC"),
            Relationship("conformsTo", "s:4Demo4LeafC", "s:SH"),
            Relationship("conformsTo", "s:4Demo4LeafC", "s:4Demo5ProtoP"),
            Relationship("conformsTo", "s:4Demo4LeafC", "s:4Demo5ProtoP"),
            Relationship("conformsTo", "s:4Demo4LeafC", "s:unresolvable"),
        ]
        renderer, structure = self.make_renderer(
            symbols, rels, {"s:4Demo4BaseC": "Base", "s:4Demo5ProtoP": "Proto"})
        assert renderer.render_symbol(structure.top_level[0]) == "public class Leaf: Base, Proto {\n}\n"

    def test_protocol_gets_no_inheritance_clause(self):
        symbols = [sym("p", "swift.protocol", "Proto", "protocol Proto : Sendable")]
        rels = [Relationship("inheritsFrom", "p", "s:4Demo4BaseP")]
        renderer, structure = self.make_renderer(symbols, rels, {"s:4Demo4BaseP": "Base"})
        assert renderer.render_symbol(structure.top_level[0]) == "public protocol Proto : Sendable {\n}\n"

    def test_free_function_is_a_leaf(self):
        symbols = [sym("f", "swift.func", "run()", "func run()", doc=["Runs."])]
        renderer, structure = self.make_renderer(symbols)
        assert renderer.render_symbol(structure.top_level[0]) == "/// Runs.\npublic func run()\n"

    def test_missing_tokens_synthesize_header(self):
        symbols = [sym("s", "swift.struct", "Point")]
        renderer, structure = self.make_renderer(symbols)
        assert renderer.render_symbol(structure.top_level[0]) == "public struct Point {\n}\n"

    def test_extension_group(self):
        members = [
            sym("m", "swift.method", "String/shout()", "func shout() -> String"),
            sym("p", "swift.property", "String/loud", "var loud: Bool"),
            sym("a", "swift.method", "String/ask()", "func ask()"),
        ]
        renderer, _ = self.make_renderer(members)
        assert renderer.render_extension_group("String", members) == (
            "extension String {\n"
            "  public var loud: Bool\n"
            "\n"
            "  public func ask()\n"
            "\n"
            "  public func shout() -> String\n"
            "}\n"
        )


class TestMarkdown:
    def test_headings_shift_by_one_from_level_two(self):
        text = "## Usage\nSome text\n### Details"
        assert adjust_heading_levels(text) == "### Usage\nSome text\n#### Details"

    def test_no_headings_unchanged(self):
        text = "Plain text\n#hashtag"
        assert adjust_heading_levels(text) == text

    def test_shift_is_capped_at_six(self):
        assert adjust_heading_levels("# Top\n###### Deep") == "### Top\n###### Deep"

    def test_fenced_code_is_not_a_heading(self):
        text = "## Intro\n```sh\n# comment\n```"
        assert adjust_heading_levels(text) == "### Intro\n```sh\n# comment\n```"

    def test_readme_title_is_stripped(self):
        readme = "# Demo\n\nIntro.\n\n## Usage\n"
        assert prepare_readme(readme, "Demo") == "Intro.\n\n### Usage"

    def test_document_layout(self):
        now = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=1)))
        document = assemble_module_document("Demo", "Intro.", ["public struct A {\n}\n", ""], now)
        assert document == (
            "## Module `Demo`\n\n"
            "Intro.\n\n"
            "### Public interface\n\n"
            "```swift\npublic struct A {\n}\n```\n\n"
            "<!-- Generated by symdoc on 2025-01-02 03:04:05 +0100 -->\n"
        )
