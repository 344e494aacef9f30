pytest_plugins = ["tests.fixtures.runners"]
