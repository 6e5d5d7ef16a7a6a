"""
Setup script for Loyalty Wallet.

Installs the package with ``pip install .`` and also carries the py2app
options for building a macOS app bundle (``python setup.py py2app`` with
py2app installed).
"""

from setuptools import setup, find_packages

APP = ['main.py']
DATA_FILES = []
OPTIONS = {
    'argv_emulation': False,
    'plist': {
        'CFBundleName': 'Loyalty Wallet',
        'CFBundleDisplayName': 'Loyalty Wallet',
        'CFBundleGetInfoString': 'Keep loyalty cards as scannable barcodes',
        'CFBundleIdentifier': 'com.loyaltywallet.wallet',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0.0',
        'NSHighResolutionCapable': True,
    },
    'packages': ['PyQt5', 'barcode', 'qrcode', 'PIL'],
}

setup(
    name='loyalty-wallet',
    version='1.0.0',
    description='Desktop wallet for loyalty cards with barcode rendering',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'PyQt5>=5.15',
        'python-barcode>=0.15',
        'qrcode>=7.0',
        'Pillow>=9.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'gui_scripts': ['loyalty-wallet = loyalty_wallet.main:main'],
    },
    app=APP,
    data_files=DATA_FILES,
    options={'py2app': OPTIONS},
)
