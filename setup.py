from setuptools import setup
setup(
  name = 'quiz_core',
  packages = [
    'quiz_core',
    ],
  package_data = {
    'quiz_core': ['queries.sql'],
    },
  py_modules = [
    'quiz_server',
    ],
  version = '0.1',
  license='',
  description = 'Interactive line based quiz server',
  author = '',
  author_email = '',
  url = '',
  download_url = '',
  keywords = ['quiz', 'trivia'],
  install_requires=[
          'tabulate      >= 0.8.7',
      ],
  classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Programming Language :: Python :: 3',
  ],
  python_requires='>=3.9',
)
