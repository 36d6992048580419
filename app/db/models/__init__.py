from .airplane import Airplane
