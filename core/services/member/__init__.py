from core.services.member.service import MemberService

__all__ = ["MemberService"]
