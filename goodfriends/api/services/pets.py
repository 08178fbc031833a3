import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.db.models import Friend, Pet
from goodfriends.api.dependencies import ReadArgs, bad_request, parse_id
from goodfriends.api.serializers import pet_to_response
from goodfriends.schemas import PetCreateRequest, PetResponse, ResponsePage

logger = logging.getLogger(__name__)


async def read_pets(
    db: AsyncSession,
    args: ReadArgs,
    friend_id: str | None = None,
) -> ResponsePage[PetResponse]:
    """Paged pets; ``friend_id`` narrows to one owner."""
    where = [Pet.seeded == args.seeded]
    if args.filter:
        where.append(Pet.name.ilike(f"%{args.filter}%"))
    if friend_id:
        where.append(Pet.friend_id == friend_id)

    total = await db.scalar(select(func.count(Pet.id)).where(*where))
    result = await db.execute(
        select(Pet)
        .where(*where)
        .order_by(Pet.name, Pet.id)
        .offset(args.page_nr * args.page_size)
        .limit(args.page_size)
    )
    return ResponsePage[PetResponse](
        page_items=[pet_to_response(p) for p in result.scalars().all()],
        page_nr=args.page_nr,
        page_size=args.page_size,
        total_count=total or 0,
    )


async def read_pet(db: AsyncSession, pet_id: str) -> PetResponse:
    pet = await db.get(Pet, pet_id)
    if not pet:
        raise bad_request(f"Item with id {pet_id} does not exist")
    return pet_to_response(pet)


async def create_pet(db: AsyncSession, body: PetCreateRequest) -> PetResponse:
    friend_id = parse_id(body.friend_id, "friendId") if body.friend_id else None
    if friend_id and not await db.get(Friend, friend_id):
        raise bad_request(f"Could not create. Error Friend with id {friend_id} does not exist")
    pet = Pet(
        name=body.name,
        kind=int(body.kind),
        mood=int(body.mood),
        friend_id=friend_id,
        seeded=False,
    )
    db.add(pet)
    await db.flush()
    logger.info("Pet %s created for friend %s", pet.id, friend_id)
    return pet_to_response(pet)


async def delete_pet(db: AsyncSession, pet_id: str) -> PetResponse:
    pet = await db.get(Pet, pet_id)
    if not pet:
        raise bad_request(f"Item with id {pet_id} does not exist")
    response = pet_to_response(pet)
    await db.delete(pet)
    await db.flush()
    logger.info("Pet %s deleted", pet_id)
    return response


class PetsService:
    read_pets = staticmethod(read_pets)
    read_pet = staticmethod(read_pet)
    create_pet = staticmethod(create_pet)
    delete_pet = staticmethod(delete_pet)


pets_service = PetsService()
