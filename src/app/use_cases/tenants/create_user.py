"""CreateUser Use Case

Registers a staff member under an existing company. Credentials are the
authentication provider's concern.
"""

from libs.result import Error, Result, Return
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DomainError
from src.domain.user import User
from .dtos import CreateUserCommandDTO, ActorDTO


class CreateUser:
    """
    Use Case: Create a user

    Errors:
        COMPANY_NOT_FOUND: company does not exist
        VALIDATION_ERROR: email blank or without "@"
        USER_ALREADY_EXISTS: email is taken
    """

    def __init__(
        self,
        uow: UnitOfWork,
        company_repo: CompanyRepository,
        user_repo: UserRepository,
    ):
        self.uow = uow
        self.company_repo = company_repo
        self.user_repo = user_repo

    async def execute(self, command: CreateUserCommandDTO) -> Result[ActorDTO]:
        try:
            company = await self.company_repo.get(command.company_id)

            if isinstance(command.email, str):
                existing = await self.user_repo.get_by_email(command.email)
                if existing:
                    return Return.err(
                        Error(
                            code="USER_ALREADY_EXISTS",
                            message=f"User {command.email} already exists",
                        )
                    )

            user = await self.user_repo.create(User(company_id=company.id, email=command.email))
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=e.code,
                    message=e.message,
                    reason=type(e).__name__,
                    details={"field": e.field, "input": command.model_dump(mode="json")},
                )
            )
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="CREATE_USER_FAILED", message="Failed to create user", reason=str(e))
            )

        return Return.ok(ActorDTO.from_user(user))
