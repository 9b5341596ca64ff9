from src.service.seating.app.dto.seat_dto import SeatFormat, SeatStatistics, SeatStatusUpdate

__all__ = ['SeatFormat', 'SeatStatistics', 'SeatStatusUpdate']
