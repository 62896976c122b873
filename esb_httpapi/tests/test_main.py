from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from esb_httpapi.exceptions import ServiceConfigError
from esb_httpapi.main import generate_routing, main


@pytest.fixture
def service_file(tmp_path, service_yaml):
    path = tmp_path / "serverless.yml"
    path.write_text(service_yaml, encoding="utf-8")
    return path


def test_generate_routing_writes_relative_to_service_file(service_file, capsys):
    """routing.yml lists every compiled route and the derived CORS methods."""
    compiled = generate_routing(service_file, service_file.parent / "out" / "routing.yml")

    output_path = service_file.parent / "out" / "routing.yml"
    assert output_path.exists()
    parsed = yaml.safe_load(output_path.read_text(encoding="utf-8"))
    assert [r["method"] + " " + r["path"] for r in parsed["routes"]] == list(compiled.routes)
    assert parsed["cors"]["allowedMethods"] == [
        "DELETE",
        "GET",
        "HEAD",
        "OPTIONS",
        "PATCH",
        "POST",
        "PUT",
    ]
    assert "Generated routing.yml with 3 route(s)" in capsys.readouterr().out


def test_generate_routing_resolves_relative_output(service_file):
    """A relative output path resolves from the service definition's directory."""
    generate_routing(service_file, Path(".esb/config/routing.yml"))

    assert (service_file.parent / ".esb" / "config" / "routing.yml").exists()


def test_generate_routing_dry_run_writes_nothing(service_file, capsys):
    """Dry run prints the manifest without writing it."""
    output_path = service_file.parent / "routing.yml"

    generate_routing(service_file, output_path, dry_run=True)

    assert not output_path.exists()
    out = capsys.readouterr().out
    assert "[DryRun]" in out
    assert "GET" in out


def test_generate_routing_missing_service_file(tmp_path):
    """A missing service definition raises ServiceConfigError."""
    with pytest.raises(ServiceConfigError):
        generate_routing(tmp_path / "missing.yml", tmp_path / "routing.yml")


def test_generate_routing_unreadable_service_file(tmp_path):
    """A service definition that cannot be read raises ServiceConfigError."""
    config_dir = tmp_path / "serverless.yml"
    config_dir.mkdir()

    with pytest.raises(ServiceConfigError) as exc_info:
        generate_routing(config_dir, tmp_path / "routing.yml")

    assert "cannot read service definition" in str(exc_info.value)
    assert isinstance(exc_info.value.cause, OSError)


def test_main_reports_route_errors(tmp_path, capsys):
    """Route conflicts exit with status 1 and name the conflicting route."""
    service_file = tmp_path / "serverless.yml"
    service_file.write_text(
        """
functions:
  a:
    events:
      - httpApi: GET /a
  b:
    events:
      - httpApi: GET /a
""",
        encoding="utf-8",
    )

    with patch("esb_httpapi.main.setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(service_file), "--output", str(tmp_path / "routing.yml")])

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Error [DuplicateRoute]" in err
    assert "GET /a" in err
    assert not (tmp_path / "routing.yml").exists()


@pytest.mark.parametrize(
    "content",
    [
        "provider: aws\n",
        "functions:\n  - hello\n",
        "functions:\n  hello: handler.hello\n",
    ],
)
def test_main_reports_wrongly_shaped_config(tmp_path, capsys, content):
    """Wrongly shaped sections are reported as InvalidServiceConfig, not a traceback."""
    service_file = tmp_path / "serverless.yml"
    service_file.write_text(content, encoding="utf-8")

    with patch("esb_httpapi.main.setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(service_file), "--output", str(tmp_path / "routing.yml")])

    assert exc_info.value.code == 1
    assert "Error [InvalidServiceConfig]" in capsys.readouterr().err


def test_main_reports_unreadable_config(tmp_path, capsys):
    """A directory passed as --config is reported as InvalidServiceConfig."""
    with patch("esb_httpapi.main.setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path), "--output", str(tmp_path / "routing.yml")])

    assert exc_info.value.code == 1
    assert "Error [InvalidServiceConfig]" in capsys.readouterr().err


def test_main_success(service_file):
    """--verbose switches logging to DEBUG and the manifest is written."""
    output_path = service_file.parent / "routing.yml"

    with patch("esb_httpapi.main.setup_logging") as mock_setup:
        main(["--config", str(service_file), "--output", str(output_path), "-v"])

    assert output_path.exists()
    assert mock_setup.call_args.args[1] == "DEBUG"
