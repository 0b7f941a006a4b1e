from setuptools import setup
import os


def get_version():
    this_directory = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(this_directory, 'rxnparse', '__init__.py')) as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip("'\"")
    raise RuntimeError('Unable to find the version string')


def main():
    this_directory = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(this_directory, 'README.rst'), 'r') as f:
        long_description = f.read()

    setup(name='rxnparse',
          version=get_version(),
          description='Compiler from chemical reaction notation to '
                      'stoichiometric matrices, dependency graphs and C '
                      'propensity functions',
          long_description=long_description,
          long_description_content_type='text/x-rst',
          packages=['rxnparse', 'rxnparse.export', 'rxnparse.examples',
                    'rxnparse.tests'],
          python_requires='>=3.6',
          install_requires=['numpy', 'scipy>=1.1', 'networkx'],
          extras_require={'test': ['pytest']},
          keywords=['systems', 'biology', 'reaction', 'network', 'stochastic',
                    'simulation', 'code generation'],
          classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Science/Research',
            'License :: OSI Approved :: BSD License',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering :: Bio-Informatics',
            'Topic :: Scientific/Engineering :: Chemistry',
            'Topic :: Software Development :: Code Generators',
            ],
          )


if __name__ == '__main__':
    main()
