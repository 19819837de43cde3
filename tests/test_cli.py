import pytest
from unittest.mock import patch

from symdoc import cli
from symdoc.package import BuildError
from symdoc.result import ModuleResult, Result, ResultStatus


class TestParser:
    def test_generate_defaults(self):
        args = cli.build_parser().parse_args(['generate'])
        assert args.symbol_graphs_dir == '.build/symbol-graphs'
        assert args.output_dir == 'docs'
        assert args.modules is None
        assert not args.generate_only
        assert args.jobs is None

    def test_generate_flags(self):
        args = cli.build_parser().parse_args([
            'generate', '--generate-only', '-v', '--be-lenient', '--include-reexported',
            '--modules', 'A,B', '--jobs', '2',
        ])
        assert args.generate_only and args.verbose and args.be_lenient and args.include_reexported
        assert args.modules == 'A,B'
        assert args.jobs == 2

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestValidateCommand:
    def test_missing_manifest_exits_one(self, temp_dir, capsys):
        assert cli.main(['validate', '--package-dir', str(temp_dir)]) == 1
        assert "Package.swift not found" in capsys.readouterr().err

    def test_valid_package(self, temp_dir, capsys):
        (temp_dir / "Package.swift").write_text("// swift-tools-version:5.9\n")
        assert cli.main(['validate', '--package-dir', str(temp_dir)]) == 0
        assert "validated" in capsys.readouterr().out


class TestBuildCommand:
    @patch("symdoc.cli.SymbolGraphBuilder")
    def test_build_failure_exits_two(self, mock_builder, temp_dir):
        (temp_dir / "Package.swift").write_text("")
        mock_builder.return_value.build.side_effect = BuildError(1, "error")
        assert cli.main(['build', '--package-dir', str(temp_dir)]) == 2

    @patch("symdoc.cli.SymbolGraphBuilder")
    def test_build_success(self, mock_builder, temp_dir):
        (temp_dir / "Package.swift").write_text("")
        assert cli.main(['build', '--package-dir', str(temp_dir), 'graphs']) == 0
        mock_builder.return_value.build.assert_called_once_with('graphs', verbose=False)


class TestGenerateCommand:
    def test_generates_from_existing_graphs(self, temp_dir, write_graph, graph_dict, symbol_dict, capsys):
        write_graph("Demo.symbols.json", graph_dict("Demo", [
            symbol_dict("s:4Demo5PointV", "swift.struct", ["Point"], fragments=["struct Point"]),
        ]))

        code = cli.main(['generate', '--generate-only', '--package-dir', str(temp_dir),
                         '--symbol-graphs-dir', 'graphs', '--jobs', '1'])

        assert code == 0
        assert (temp_dir / "docs" / "Demo.md").exists()
        assert "Generated Demo" in capsys.readouterr().out

    @patch("symdoc.cli.DocProcessor")
    def test_exit_code_comes_from_result(self, mock_processor, temp_dir):
        mock_processor.return_value.process.return_value = Result(
            status=ResultStatus.PARTIAL, message="1 generated, 0 skipped, 1 failed",
            module_results=[ModuleResult.failed("Broken", "invalid JSON")], exit_code=3)

        assert cli.main(['generate', '--package-dir', str(temp_dir), '--jobs', '1']) == 3

    def test_invalid_jobs(self, temp_dir):
        assert cli.main(['generate', '--package-dir', str(temp_dir), '--jobs', '0']) == 1
