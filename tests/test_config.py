from cpu_profile.core.config import ProfileConfig, create_default_config


def test_defaults_without_file(tmp_path):
    config = ProfileConfig(str(tmp_path / "absent.ini"))

    assert config.get_probe_config() == {'command_timeout': 30.0, 'check_executables': True}
    assert config.get_output_config() == {'format': 'json', 'indent': 2}
    assert config.get_logging_config()['log_level'] == 'WARNING'
    assert config.get_logging_config()['log_file'] == ''
    assert config.validate()


def test_file_overrides_defaults(tmp_path):
    config_file = tmp_path / "config.ini"
    config_file.write_text("[output]\nformat = text\n\n[logging]\nlog_level = DEBUG\n")

    config = ProfileConfig(str(config_file))

    assert config.get_output_config()['format'] == 'text'
    assert config.get_logging_config()['log_level'] == 'DEBUG'
    assert config.get_probe_config()['command_timeout'] == 30.0


def test_validation_errors(tmp_path):
    config = ProfileConfig(str(tmp_path / "absent.ini"))
    config.set('output', 'format', 'xml')
    config.set('probe', 'command_timeout', '-1')
    config.set('logging', 'log_level', 'VERBOSE')

    errors = config.validation_errors()

    assert len(errors) == 3
    assert not config.validate()


def test_non_numeric_timeout_is_invalid(tmp_path):
    config = ProfileConfig(str(tmp_path / "absent.ini"))
    config.set('probe', 'command_timeout', 'soon')

    assert config.validation_errors() == ["Délai des commandes invalide (nombre attendu)"]


def test_create_default_config_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.ini"

    create_default_config(str(path))

    assert path.exists()
    reloaded = ProfileConfig(str(path))
    assert reloaded.get_output_config() == {'format': 'json', 'indent': 2}
