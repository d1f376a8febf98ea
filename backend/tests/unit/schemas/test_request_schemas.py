"""
Unit Tests for request schemas
"""
from datetime import datetime

import pytest
from pydantic import ValidationError

from app.schemas.ai import BusinessModelRequest, PitchDeckRequest
from app.schemas.auth import UserRegister, UserResponse, UserUpdate
from app.schemas.planning import CompetitorInput, StartupIdeaInput, TargetAudienceInput
from app.schemas.task import TaskCreate
from app.models.task import TaskPriority, TaskStatus
from app.models.user import User


class TestUserRegister:

    def test_valid(self):
        user = UserRegister(username='ada_l', email='ada@example.com', password='secret1', full_name='Ada')
        assert user.username == 'ada_l'

    def test_username_strips_whitespace(self):
        user = UserRegister(username='  ada.l ', email='ada@example.com', password='secret1', full_name='Ada')
        assert user.username == 'ada.l'

    @pytest.mark.parametrize('username', ['ab', 'has space', 'semi;colon'])
    def test_rejects_bad_usernames(self, username):
        with pytest.raises(ValidationError):
            UserRegister(username=username, email='ada@example.com', password='secret1', full_name='Ada')

    def test_rejects_short_password(self):
        with pytest.raises(ValidationError):
            UserRegister(username='ada', email='ada@example.com', password='123', full_name='Ada')

    def test_rejects_bad_email(self):
        with pytest.raises(ValidationError):
            UserRegister(username='ada', email='not-an-email', password='secret1', full_name='Ada')

    def test_email_is_lower_cased(self):
        user = UserRegister(username='ada', email='Ada.Lovelace@Example.COM', password='secret1', full_name='Ada')
        assert user.email == 'ada.lovelace@example.com'

    def test_profile_update_lower_cases_email(self):
        assert UserUpdate(email='Ada@Example.com').email == 'ada@example.com'
        assert UserUpdate(bio='hi').email is None


class TestUserResponse:

    def test_never_exposes_password_hash(self):
        user = User(
            id=1, username='ada', email='a@b.co', full_name='Ada',
            hashed_password='$2b$hash', created_at=datetime.utcnow(),
        )

        data = UserResponse.model_validate(user).model_dump()

        assert 'hashed_password' not in data
        assert data['username'] == 'ada'


class TestPlanningInputs:

    def test_idea_requires_core_fields(self):
        with pytest.raises(ValidationError):
            StartupIdeaInput(problem_statement='p', solution='s')

    def test_idea_tracks_unset_fields(self):
        idea = StartupIdeaInput(
            problem_statement='p', solution='s',
            unique_value_proposition='u', target_industry='t',
        )
        assert 'target_market_size' not in idea.model_dump(exclude_unset=True)

    def test_audience_documents_accept_partial_pages(self):
        audience = TargetAudienceInput(
            demographics={'age_range': '18-25'},
            psychographics={},
            buying_behavior={'purchase_channels': ['web'], 'unknown_key': 1},
        )
        assert audience.demographics.age_range == '18-25'
        assert audience.buying_behavior.purchase_channels == ['web']

    def test_competition_defaults(self):
        competition = CompetitorInput()
        assert competition.competitor_data == []
        assert competition.swot_analysis.threats == []


class TestTaskCreate:

    def test_defaults(self):
        task = TaskCreate(title='Call investor')
        assert task.status == TaskStatus.PENDING
        assert task.priority == TaskPriority.MEDIUM

    def test_hyphenated_status(self):
        assert TaskCreate(title='x', status='in-progress').status == TaskStatus.IN_PROGRESS

    def test_rejects_unknown_priority(self):
        with pytest.raises(ValidationError):
            TaskCreate(title='x', priority='critical')


class TestAIRequests:

    def test_camel_case_aliases(self):
        request = BusinessModelRequest(idea='i', industry='Retail', targetAudience='Students')
        assert request.target_audience == 'Students'

    def test_snake_case_names(self):
        request = PitchDeckRequest(
            startup_name='Acme', idea='i', industry='Retail',
            target_audience='Students', business_model='SaaS',
        )
        assert request.startup_name == 'Acme'

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            BusinessModelRequest(idea='i', industry='Retail')
