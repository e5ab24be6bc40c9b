"""VaultHub Client Meta information.
   VaultHub Client talks to a VaultHub vault service and guards navigation
   between authenticated views.
"""
__title__ = 'vaulthub_client'
__description__ = (
   'Session and access-control gateway for the VaultHub '
   'secrets vault service.'
)
__version__ = '0.3.0'
__copyright__ = 'Copyright (c) 2025 VaultHub Contributors'
__author__ = 'VaultHub Contributors'
__author_email__ = 'dev@vaulthub.local'
__license__ = 'Apache-2.0'
__url__ = 'https://github.com/cuihe500/vaulthub'
