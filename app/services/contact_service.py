from sqlalchemy.orm import Session
from app.models.contact import Contact
from app.models.tenant_context import TenantContext
from app.repositories.contact_repository import ContactRepository
from app.schemas.contact_schemas import ContactCreate, ContactUpdate
from app.services.account_service import AccountService
from app.core.exceptions import NotFoundException, ValidationException


class ContactService:
    """
    Contacts belong to an account through its account number.

    At most one contact per account number is the main contact.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ContactRepository(db)
        self.account_service = AccountService(db)

    def get_account_contacts(self, account_id: str, context: TenantContext) -> list[Contact]:
        account = self.account_service.get_account(account_id, context)
        if not account.account_number:
            return []
        return self.repo.get_by_account_number(account.account_number, context.company_id)

    def add_contact(self, account_id: str, data: ContactCreate, context: TenantContext) -> Contact:
        """
        Raises:
            NotFoundException: If account not found
            ValidationException: If the account has no account number
        """
        account = self.account_service.get_account(account_id, context)
        if not account.account_number:
            raise ValidationException("Account has no account number; contacts cannot be linked")

        if data.is_main_contact:
            self.repo.clear_main_contact(account.account_number, context.company_id)

        contact = Contact(
            company_id=context.company_id,
            account_number=account.account_number,
            name=data.name,
            email=str(data.email),
            phone=data.phone,
            location=data.location,
            is_main_contact=data.is_main_contact,
            avatar_url=data.avatar_url,
        )
        return self.repo.create(contact)

    def get_contact(self, contact_id: str, context: TenantContext) -> Contact:
        contact = self.repo.get_by_id_and_company(contact_id, context.company_id)
        if not contact:
            raise NotFoundException("Contact not found")
        return contact

    def update_contact(self, contact_id: str, data: ContactUpdate, context: TenantContext) -> Contact:
        contact = self.get_contact(contact_id, context)

        if data.is_main_contact and contact.account_number:
            self.repo.clear_main_contact(contact.account_number, context.company_id, except_id=contact.id)

        updates = data.model_dump(exclude_unset=True, exclude_none=True)
        if "email" in updates:
            updates["email"] = str(updates["email"])
        for field, value in updates.items():
            setattr(contact, field, value)

        return self.repo.update(contact)

    def delete_contact(self, contact_id: str, context: TenantContext) -> None:
        contact = self.get_contact(contact_id, context)
        self.repo.delete(contact)
