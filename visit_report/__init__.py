"""
Visit Report Service - Reportes de visitas a tiendas
"""
__version__ = "1.0.0"
