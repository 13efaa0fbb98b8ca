"""
Package des fournisseurs de données spécifiques par plateforme

Windows uniquement : WMI, COM (Outlook) et registre.
"""

from .windows import OutlookProvider, RegistryProxyProvider, WmiProvider

__all__ = ['OutlookProvider', 'RegistryProxyProvider', 'WmiProvider']
