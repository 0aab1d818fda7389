import json

import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from bank_queue.scripts.run_simulation import (
    build_config,
    convert_numpy_types,
    main,
    parse_args,
    prompt_value,
)


def answers(*values):
    replies = iter(values)
    return lambda prompt: next(replies)


def test_report_lists_every_statistic(capsys):
    main(['0.5', '2', '-s', '42'])
    out = capsys.readouterr().out
    assert 'BANK QUEUE SIMULATION REPORT' in out
    assert 'Simulation length          : 480 minutes (8 hours)' in out
    assert 'Lambda (arrivals / minute) : 0.500' in out
    assert 'Tellers                    : 2' in out
    for label in ('Total customers arrived', 'Total customers served',
                  'Recorded wait samples', 'Mean wait time', 'Median wait time',
                  'Mode wait time (rounded)', 'Std. Deviation of waits',
                  'Longest wait time'):
        assert label in out


def test_zero_lambda_reports_no_customers(capsys):
    main(['0', '1', '-s', '1'])
    out = capsys.readouterr().out
    assert 'No customers were served during the simulation.' in out
    assert 'Mean wait time' not in out


def test_teller_count_below_one_runs_with_one(capsys):
    main(['0.3', '0', '-s', '2'])
    assert 'Tellers                    : 1' in capsys.readouterr().out


def test_invalid_lambda_aborts_without_report(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['-1', '2'])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert 'Error:' in captured.err
    assert 'REPORT' not in captured.out


def test_non_numeric_lambda_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(['lots', '2'])
    assert excinfo.value.code == 2


def test_missing_values_are_prompted():
    config = build_config(parse_args(['-s', '4']), input_func=answers('0.75', '3'))
    assert config.arrival_rate == 0.75
    assert config.teller_count == 3
    assert config.seed == 4


def test_malformed_prompt_input_is_an_error():
    with pytest.raises(ValueError):
        build_config(parse_args([]), input_func=answers('abc'))
    with pytest.raises(ValueError):
        build_config(parse_args(['0.5']), input_func=answers('two'))


def test_prompt_end_of_input_is_an_error():
    def closed(prompt):
        raise EOFError

    with pytest.raises(ValueError):
        prompt_value('lambda: ', float, closed)


def test_config_file_with_flag_overrides(tmp_path, capsys):
    config_path = tmp_path / 'bank.json'
    config_path.write_text(json.dumps({'arrival_rate': 0.4, 'teller_count': 3,
                                       'seed': 5, 'simulation_minutes': 60}))
    output_path = tmp_path / 'results.json'

    main(['--config', str(config_path), '-t', '90', '-o', str(output_path), '-q'])
    assert capsys.readouterr().out == ''

    results = json.loads(output_path.read_text())
    assert results['config']['teller_count'] == 3
    assert results['config']['simulation_minutes'] == 90
    assert len(results['arrival_history']) == 90
    assert len(results['wait_samples']) == results['system']['total_served']
    assert results['system']['total_served'] == results['system']['total_arrived']


def test_missing_config_file_aborts(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(['--config', str(tmp_path / 'missing.json')])
    assert excinfo.value.code == 1


def test_plot_file_is_written(tmp_path):
    plot_path = tmp_path / 'day.png'
    main(['1.0', '2', '-s', '3', '-t', '60', '--plot-file', str(plot_path), '-q'])
    assert plot_path.exists()


def test_convert_numpy_types():
    converted = convert_numpy_types({'a': np.int64(3), 'b': (np.float64(1.5),),
                                     'c': np.arange(2)})
    assert converted == {'a': 3, 'b': [1.5], 'c': [0, 1]}
    assert type(converted['a']) is int
