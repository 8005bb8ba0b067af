from .goodyear_scraper import GoodyearTireScraper
from .tire_data import TireData

__all__ = ["GoodyearTireScraper", "TireData"]
