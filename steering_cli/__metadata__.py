"""Steering CLI metadata."""
__author__ = 'Steering CLI Maintainers'
__author_email__ = 'maintainers@steering-cli.dev'
__description__ = 'Steering Template Catalogue CLI'
__license__ = 'Apache License, Version 2'
__package_name__ = 'steering_cli'
__url__ = 'https://github.com/steering-cli/steering-cli'
__version__ = '0.1.0'
__download_url__ = f'https://github.com/steering-cli/steering-cli/tarball/{__version__}'
