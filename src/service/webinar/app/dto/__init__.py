from src.service.webinar.app.dto.book_seat_dto import BookSeatRequest, BookSeatResult


__all__ = ['BookSeatRequest', 'BookSeatResult']
