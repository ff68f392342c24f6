import logging

from sirene_ui.lib import logs


def test_module_name_follows_package_path():
    assert logs.module_name("/srv/app/src/sirene_ui/api/sirene.py") == "sirene_ui.api.sirene"
    assert logs.module_name("/srv/app/src/sirene_ui/services/__init__.py") == "sirene_ui.services"
    assert logs.module_name("/tmp/scratch.py") == "sirene_ui.scratch"


def test_module_loggers_share_the_package_handler():
    log = logs.logger("/srv/app/src/sirene_ui/api/ban.py")
    root = logging.getLogger(logs.ROOT_NAME)

    assert log.name == "sirene_ui.api.ban"
    assert log.handlers == []
    assert log.propagate
    assert len(root.handlers) == 1
    assert not root.propagate

    logs.logger("/srv/app/src/sirene_ui/api/completion.py")
    assert len(root.handlers) == 1


def test_plain_names_are_namespaced():
    assert logs.logger("worker").name == "sirene_ui.worker"
    assert logs.logger("sirene_ui.session").name == "sirene_ui.session"
    assert logs.logger("sirene_ui") is logging.getLogger("sirene_ui")
