"""
doit tasks for testing bltree.
Run with: doit
"""

# Python test files
PYTHON_TESTS = [
    'tests/test_tree.py',
    'tests/test_lexer.py',
    'tests/test_condition.py',
    'tests/test_config.py',
    'tests/test_statement.py',
    'tests/test_statement_properties.py',
    'tests/test_program.py',
]

def task_test_python():
    """Run Python tests"""
    def run_python_tests():
        import pytest
        return pytest.main(['-v'] + PYTHON_TESTS) == 0

    return {
        'actions': [run_python_tests],
        'file_dep': PYTHON_TESTS,
        'verbosity': 2,
    }

def task_test():
    """Run all tests"""
    return {
        'actions': None,
        'task_dep': ['test_python'],
    }
