"""LeadForm - registros de CRM con campos, tipos y restricciones definidos por configuración."""

__version__ = "0.1.0"
