from click.testing import CliRunner

import run


def _patch_server(monkeypatch, app_factory):
    calls = {'create_app': [], 'run': []}

    def fake_create_app(**kwargs):
        calls['create_app'].append(kwargs)
        return app_factory(PORT=3000, HOST='127.0.0.1')

    monkeypatch.setattr(run, 'create_app', fake_create_app)
    monkeypatch.setattr(run.socketio, 'run', lambda app, **kwargs: calls['run'].append(kwargs))
    return calls


def test_importing_run_builds_no_app():
    assert not hasattr(run, 'app')


def test_defaults_come_from_config(monkeypatch, app_factory):
    calls = _patch_server(monkeypatch, app_factory)
    result = CliRunner().invoke(run.main, [])
    assert result.exit_code == 0, result.output
    assert calls['run'][0]['host'] == '127.0.0.1'
    assert calls['run'][0]['port'] == 3000
    assert calls['create_app'] == [{'start_sweeper': True}]


def test_explicit_port_zero_is_kept(monkeypatch, app_factory):
    calls = _patch_server(monkeypatch, app_factory)
    result = CliRunner().invoke(run.main, ['--port', '0'])
    assert result.exit_code == 0, result.output
    assert calls['run'][0]['port'] == 0


def test_reloader_parent_skips_sweeper(monkeypatch, app_factory):
    calls = _patch_server(monkeypatch, app_factory)
    monkeypatch.delenv('WERKZEUG_RUN_MAIN', raising=False)
    CliRunner().invoke(run.main, ['--debug'])
    assert calls['create_app'] == [{'start_sweeper': False}]

    monkeypatch.setenv('WERKZEUG_RUN_MAIN', 'true')
    CliRunner().invoke(run.main, ['--debug'])
    assert calls['create_app'][-1] == {'start_sweeper': True}
