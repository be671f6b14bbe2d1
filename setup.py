# vim: fileencoding=utf-8

import os
import setuptools

# don't import: import * is unreliable and there is no need, since this is
# compile time and we have source files
def get_console_scripts():
    for filename in os.listdir('./vmrunctl/tools'):
        basename, ext = os.path.splitext(os.path.basename(filename))
        if basename == '__init__' or ext != '.py':
            continue
        yield basename.replace('_', '-'), 'vmrunctl.tools.{}'.format(
            basename)

scripts = []
for filename, pkg in get_console_scripts():
    scripts.append(f'{filename} = {pkg}:main')

if __name__ == '__main__':
    setuptools.setup(
        name='vmrunctl',
        version=open('version', encoding='ascii').read().strip(),
        description='Suspend, resume and list virtual machines through '
                    'the vmrun control tool',
        license='LGPL2.1+',
        python_requires='>=3.8',
        packages=setuptools.find_packages(),
        entry_points={
            'console_scripts': scripts
        },
        extras_require={
            'test': ['pytest'],
        },
    )
