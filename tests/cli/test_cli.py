"""
Tests for the command-line interface
"""

import json
import logging

import pytest

import pathfind
from gridpath.cli import setup_argument_parser, parse_arguments, requested_outputs, format_path
from gridpath.core.config import GridConfig
from gridpath.core.flatten import FlattenedView


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove handlers added by setup_logging"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


class TestArgumentParser:
    """Tests for argument parsing"""

    def test_input_required(self):
        parser = setup_argument_parser()
        with pytest.raises(SystemExit) as exc:
            parse_arguments(parser, ['-j', 'out.json'])
        assert exc.value.code == 2

    def test_output_required(self):
        """Test that at least one output file must be given"""
        parser = setup_argument_parser()
        with pytest.raises(SystemExit) as exc:
            parse_arguments(parser, ['-i', 'grid.json'])
        assert exc.value.code == 2

    def test_both_outputs(self):
        parser = setup_argument_parser()
        args = parse_arguments(parser, ['-i', 'grid.json', '-j', 'a.json', '-s', 'a.svg'])

        assert args.input == 'grid.json'
        assert requested_outputs(args) == ['json', 'svg']

    def test_csv_only(self):
        parser = setup_argument_parser()
        args = parse_arguments(parser, ['--input', 'grid.json', '--csv', 'edges.csv'])
        assert requested_outputs(args) == ['csv']
        assert args.log_level == 'INFO'


class TestFormatPath:
    def test_no_path(self):
        assert format_path(FlattenedView()) == "no path"

    def test_short_path(self, view_3x3):
        assert format_path(view_3x3, limit=10).count('->') == 4

    def test_long_path_elided(self, view_3x3):
        text = format_path(view_3x3, limit=2)
        assert text == "(0, 0) -> ... -> (2, 2)"


class TestRun:
    """Tests for the build, search, flatten pipeline"""

    def test_reference_scenario(self, sample_config_dict):
        graph, result, view = pathfind.run(GridConfig(sample_config_dict))

        assert graph.node_count == 9
        assert result.cost == 4
        assert len(view.edges) == 12

    def test_zero_area(self, sample_config_dict):
        sample_config_dict['height'] = 0
        graph, result, view = pathfind.run(GridConfig(sample_config_dict))

        assert graph.is_empty
        assert result is None
        assert view.nodes == [] and view.edges == []


class TestMain:
    """End-to-end tests for main()"""

    def test_writes_all_outputs(self, tmp_path, config_file, capsys):
        json_path = tmp_path / 'out.json'
        svg_path = tmp_path / 'out.svg'
        csv_path = tmp_path / 'edges.csv'

        code = pathfind.main([
            '-i', str(config_file),
            '-j', str(json_path),
            '-s', str(svg_path),
            '--csv', str(csv_path),
            '--log-level', 'ERROR',
        ])

        assert code == 0
        data = json.loads(json_path.read_text(encoding='utf-8'))
        assert len(data['path']) == 5
        assert svg_path.read_text(encoding='utf-8').startswith('<svg')
        assert csv_path.exists()
        assert 'Path cost 4' in capsys.readouterr().out

    def test_no_path_still_exports(self, tmp_path, sample_config_dict):
        """Test that a start outside the grid exports the grid without a path"""
        sample_config_dict['start'] = {'x': 10, 'y': 10}
        config_path = tmp_path / 'grid.json'
        config_path.write_text(json.dumps(sample_config_dict), encoding='utf-8')
        json_path = tmp_path / 'out.json'

        code = pathfind.main(['-i', str(config_path), '-j', str(json_path), '--log-level', 'ERROR'])

        assert code == 0
        assert 'path' not in json.loads(json_path.read_text(encoding='utf-8'))

    def test_invalid_config(self, tmp_path, capsys):
        """Test that a malformed configuration aborts with exit code 1"""
        config_path = tmp_path / 'grid.json'
        config_path.write_text('{"width": 3}', encoding='utf-8')

        code = pathfind.main(['-i', str(config_path), '-j', str(tmp_path / 'out.json'), '--log-level', 'ERROR'])

        assert code == 1
        assert not (tmp_path / 'out.json').exists()
        assert 'validation failed' in capsys.readouterr().err

    def test_missing_config(self, tmp_path):
        code = pathfind.main(['-i', str(tmp_path / 'none.json'), '-s', str(tmp_path / 'x.svg'), '--log-level', 'ERROR'])
        assert code == 1

    def test_log_file(self, tmp_path, config_file):
        log_path = tmp_path / 'run.log'
        pathfind.main([
            '-i', str(config_file),
            '-j', str(tmp_path / 'out.json'),
            '--log-level', 'ERROR',
            '--log-file', str(log_path),
        ])

        assert 'costs 4' in log_path.read_text(encoding='utf-8')

    def test_unreadable_config(self, tmp_path, capsys):
        """Test that a directory given as input aborts with exit code 1"""
        code = pathfind.main(['-i', str(tmp_path), '-j', str(tmp_path / 'out.json'), '--log-level', 'ERROR'])

        assert code == 1
        assert not (tmp_path / 'out.json').exists()
        assert 'Failed to read configuration file' in capsys.readouterr().err

    def test_log_file_in_missing_directory(self, tmp_path, config_file, capsys):
        code = pathfind.main([
            '-i', str(config_file),
            '-j', str(tmp_path / 'out.json'),
            '--log-level', 'ERROR',
            '--log-file', str(tmp_path / 'missing' / 'run.log'),
        ])

        assert code == 1
        assert not (tmp_path / 'out.json').exists()
        assert 'Cannot open log file' in capsys.readouterr().err
