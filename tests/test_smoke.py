import unittest


class SmokeTest(unittest.TestCase):
    def test_import_domain_modules(self):
        import load_planner  # noqa: F401
        import load_planner.catalog  # noqa: F401
        import load_planner.io  # noqa: F401
        import load_planner.metrics  # noqa: F401
        import load_planner.models  # noqa: F401
        import load_planner.reporting  # noqa: F401
        import load_planner.selector  # noqa: F401
        import load_planner.stats  # noqa: F401


if __name__ == '__main__':
    unittest.main()
