from datetime import datetime, timedelta, timezone
import typing as t

from db.schemas.projects import Creator, Project, ProjectLocation

# Mock catalog, dates are relative to the moment the catalog is loaded

PRIYA = Creator(
    id='1',
    displayName='Priya Fernando',
    verificationStatus='verified',
    rating=4.8,
    location='Colombo, Sri Lanka',
)
ANURA = Creator(
    id='2',
    displayName='Anura Silva',
    verificationStatus='verified',
    rating=4.6,
    location='Kandy, Sri Lanka',
)
SANDUNI = Creator(
    id='3',
    displayName='Sanduni Perera',
    verificationStatus='verified',
    rating=4.9,
    location='Galle, Sri Lanka',
)


def seed_projects(now: t.Optional[datetime] = None) -> t.Tuple[Project, ...]:
    now = now or datetime.now(timezone.utc)
    days = lambda n: now + timedelta(days=n)

    return (
        Project(
            id='1',
            title='Clean Water Initiative for Rural Schools',
            slug='clean-water-rural-schools',
            description='Providing clean drinking water and sanitation facilities to 15 rural schools in the Uva Province. This project will benefit over 3,000 students and their families by installing water purification systems and building proper toilet facilities.',
            shortDescription='Bringing clean water to 15 rural schools in Uva Province',
            category='community',
            tags=('water', 'education', 'rural', 'children', 'health'),
            creator=PRIYA,
            fundingGoal=500000,
            currentAmount=342000,
            donorCount=89,
            status='active',
            startDate=days(-15),
            endDate=days(25),
            createdAt=days(-20),
            updatedAt=now,
            launchedAt=days(-15),
            location=ProjectLocation(country='Sri Lanka', state='Uva Province', city='Badulla'),
            featured=True,
        ),
        Project(
            id='2',
            title='Sri Lankan Wildlife Conservation App',
            slug='wildlife-conservation-app',
            description='Developing a mobile app to track and protect endangered species in Sri Lankan national parks. The app will use AI to identify animals from photos and help rangers monitor wildlife populations in real-time.',
            shortDescription='AI-powered app for protecting Sri Lankan wildlife',
            category='technology',
            tags=('technology', 'wildlife', 'conservation', 'ai', 'mobile'),
            creator=ANURA,
            fundingGoal=800000,
            currentAmount=620000,
            donorCount=156,
            status='active',
            startDate=days(-8),
            endDate=days(35),
            createdAt=days(-12),
            updatedAt=now,
            launchedAt=days(-8),
            location=ProjectLocation(country='Sri Lanka', state='Southern Province', city='Yala'),
            featured=True,
            trending=True,
        ),
        Project(
            id='3',
            title='Emergency Medical Fund for Rural Clinic',
            slug='emergency-medical-fund-rural',
            description='Supporting the Ella Medical Clinic with emergency medical equipment and supplies. The clinic serves over 5,000 residents in remote areas and desperately needs updated equipment to handle emergency cases.',
            shortDescription='Emergency medical equipment for rural clinic serving 5,000 people',
            category='medical',
            tags=('medical', 'emergency', 'rural', 'healthcare', 'equipment'),
            creator=PRIYA,
            fundingGoal=300000,
            currentAmount=285000,
            donorCount=134,
            status='active',
            startDate=days(-22),
            endDate=days(8),
            createdAt=days(-25),
            updatedAt=now,
            launchedAt=days(-22),
            location=ProjectLocation(country='Sri Lanka', state='Uva Province', city='Ella'),
            urgent=True,
        ),
        Project(
            id='4',
            title='Scholarship Program for Underprivileged Students',
            slug='scholarship-underprivileged-students',
            description='Providing scholarships and educational support for 50 underprivileged students in Colombo. This program covers school fees, books, uniforms, and lunch for one academic year.',
            shortDescription='Educational scholarships for 50 students in Colombo',
            category='education',
            tags=('education', 'scholarship', 'students', 'underprivileged', 'school'),
            creator=PRIYA,
            fundingGoal=750000,
            currentAmount=180000,
            donorCount=67,
            status='active',
            startDate=days(-5),
            endDate=days(55),
            createdAt=days(-8),
            updatedAt=now,
            launchedAt=days(-5),
            location=ProjectLocation(country='Sri Lanka', state='Western Province', city='Colombo'),
        ),
        Project(
            id='5',
            title='Sea Turtle Conservation Program',
            slug='sea-turtle-conservation',
            description='Protecting sea turtle nesting sites along the southern coast of Sri Lanka. This program includes night patrols, nest protection, and community education about marine conservation.',
            shortDescription='Protecting sea turtle nesting sites on Sri Lankan coast',
            category='animals',
            tags=('conservation', 'sea turtles', 'marine', 'environment', 'wildlife'),
            creator=SANDUNI,
            fundingGoal=450000,
            currentAmount=450000,
            donorCount=203,
            status='completed',
            startDate=days(-45),
            endDate=days(-2),
            createdAt=days(-50),
            updatedAt=days(-2),
            launchedAt=days(-45),
            location=ProjectLocation(country='Sri Lanka', state='Southern Province', city='Mirissa'),
            featured=True,
        ),
        Project(
            id='6',
            title='Traditional Dance Festival Revival',
            slug='traditional-dance-festival',
            description='Reviving the annual Kandyan dance festival with traditional performances, workshops, and cultural education programs. Supporting local artists and preserving Sri Lankan cultural heritage.',
            shortDescription='Reviving traditional Kandyan dance festival and cultural programs',
            category='arts_culture',
            tags=('culture', 'dance', 'traditional', 'kandyan', 'festival', 'heritage'),
            creator=ANURA,
            fundingGoal=250000,
            currentAmount=95000,
            donorCount=42,
            status='active',
            startDate=days(-12),
            endDate=days(18),
            createdAt=days(-15),
            updatedAt=now,
            launchedAt=days(-12),
            location=ProjectLocation(country='Sri Lanka', state='Central Province', city='Kandy'),
        ),
        Project(
            id='7',
            title='Youth Cricket Development Program',
            slug='youth-cricket-development',
            description='Training and equipment for young cricketers in rural areas. This program provides coaching, equipment, and tournament opportunities for talented young players who lack resources.',
            shortDescription='Cricket training and equipment for rural youth',
            category='sports',
            tags=('sports', 'cricket', 'youth', 'rural', 'training', 'equipment'),
            creator=ANURA,
            fundingGoal=350000,
            currentAmount=125000,
            donorCount=38,
            status='active',
            startDate=days(-3),
            endDate=days(42),
            createdAt=days(-6),
            updatedAt=now,
            launchedAt=days(-3),
            location=ProjectLocation(country='Sri Lanka', state='North Central Province', city='Anuradhapura'),
        ),
        Project(
            id='8',
            title='Flood Relief Emergency Fund',
            slug='flood-relief-emergency',
            description='Emergency relief for families affected by recent flooding in Ratnapura district. Providing food, clean water, temporary shelter, and medical supplies to 200+ affected families.',
            shortDescription='Emergency flood relief for 200+ families in Ratnapura',
            category='disaster_relief',
            tags=('emergency', 'flood', 'relief', 'disaster', 'families', 'urgent'),
            creator=SANDUNI,
            fundingGoal=600000,
            currentAmount=520000,
            donorCount=287,
            status='active',
            startDate=days(-1),
            endDate=days(14),
            createdAt=days(-2),
            updatedAt=now - timedelta(hours=2),
            launchedAt=days(-1),
            location=ProjectLocation(country='Sri Lanka', state='Sabaragamuwa Province', city='Ratnapura'),
            featured=True,
            trending=True,
            urgent=True,
        ),
    )
