# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from invoke import task


@task(help={
    'scope': ("Which source directory to check, can be one of 'cloudthing_api', "
              "'tests', 'integration_tests', 'samples' or 'all'. Default: 'all'")
})
def lint(c, scope='all'):
    """Run PyLint."""
    if scope == 'all':
        scope = 'cloudthing_api tests integration_tests samples'
    c.run(f'pylint --fail-under=9 {scope}')


@task(help={
    'online': "Whether to include the integration tests (requires a .env file)."
})
def test(c, online=False):
    """Run the test suite."""
    if online:
        c.run('pytest tests integration_tests')
    else:
        c.run('pytest tests -m "not online"')


@task
def build(c):
    """Build the module.

    This will create a distributable wheel (.whl) file.
    """
    c.run('python -m build')


@task(help={
    'clean': "Whether to clean the output before generation."
})
def build_docs(c, clean=False):
    """Build the documentation (HTML)."""
    dist_dir = 'dist/docs'
    docs_dir = 'docs'
    if clean:
        c.run(f'sphinx-build -M clean "{docs_dir}"  "{dist_dir}"')
    c.run(f'sphinx-build -M html "{docs_dir}"  "{dist_dir}"')
