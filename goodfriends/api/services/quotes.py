import logging

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from goodfriends.api.db.models import Friend, Quote, friend_quotes
from goodfriends.api.dependencies import ReadArgs, bad_request, parse_id
from goodfriends.api.serializers import quote_to_response
from goodfriends.schemas import QuoteCreateRequest, QuoteResponse, ResponsePage

logger = logging.getLogger(__name__)


async def read_quotes(
    db: AsyncSession,
    args: ReadArgs,
    friend_id: str | None = None,
) -> ResponsePage[QuoteResponse]:
    where = [Quote.seeded == args.seeded]
    if args.filter:
        pattern = f"%{args.filter}%"
        where.append(or_(Quote.quote_text.ilike(pattern), Quote.author.ilike(pattern)))
    if friend_id:
        owned = select(friend_quotes.c.quote_id).where(friend_quotes.c.friend_id == friend_id)
        where.append(Quote.id.in_(owned))

    total = await db.scalar(select(func.count(Quote.id)).where(*where))
    result = await db.execute(
        select(Quote)
        .where(*where)
        .options(selectinload(Quote.friends))
        .order_by(Quote.author, Quote.id)
        .offset(args.page_nr * args.page_size)
        .limit(args.page_size)
    )
    return ResponsePage[QuoteResponse](
        page_items=[quote_to_response(q) for q in result.scalars().all()],
        page_nr=args.page_nr,
        page_size=args.page_size,
        total_count=total or 0,
    )


async def _get_quote(db: AsyncSession, quote_id: str) -> Quote | None:
    result = await db.execute(
        select(Quote).where(Quote.id == quote_id).options(selectinload(Quote.friends))
    )
    return result.scalar_one_or_none()


async def read_quote(db: AsyncSession, quote_id: str) -> QuoteResponse:
    quote = await _get_quote(db, quote_id)
    if not quote:
        raise bad_request(f"Item with id {quote_id} does not exist")
    return quote_to_response(quote)


async def create_quote(db: AsyncSession, body: QuoteCreateRequest) -> QuoteResponse:
    """Create a quote owned by every friend in ``friendIds`` (or the single ``friendId``)."""
    friend_ids = [parse_id(fid, "friendId") for fid in body.friend_ids or []]
    friends = []
    if friend_ids:
        result = await db.execute(select(Friend).where(Friend.id.in_(friend_ids)))
        friends = list(result.scalars().all())
        missing = set(friend_ids) - {f.id for f in friends}
        if missing:
            raise bad_request(f"Could not create. Error Friend(s) not found: {', '.join(sorted(missing))}")

    quote = Quote(quote_text=body.quote_text, author=body.author, seeded=False)
    quote.friends = friends
    db.add(quote)
    await db.flush()
    logger.info("Quote %s created for %d friend(s)", quote.id, len(friends))
    return quote_to_response(quote)


async def delete_quote(db: AsyncSession, quote_id: str) -> QuoteResponse:
    quote = await _get_quote(db, quote_id)
    if not quote:
        raise bad_request(f"Item with id {quote_id} does not exist")
    response = quote_to_response(quote)
    await db.delete(quote)
    await db.flush()
    logger.info("Quote %s deleted", quote_id)
    return response


class QuotesService:
    read_quotes = staticmethod(read_quotes)
    read_quote = staticmethod(read_quote)
    create_quote = staticmethod(create_quote)
    delete_quote = staticmethod(delete_quote)


quotes_service = QuotesService()
