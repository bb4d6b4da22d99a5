import importlib


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_overview_page_is_registered():
    pages = importlib.import_module("app.pages")

    assert callable(pages.render_overview_page)
