from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IssueKind(str, Enum):
    """Issues a section scorer can raise. The value is the message shown to users."""

    MISSING_EMAIL = "Missing email address"
    MISSING_PHONE = "Missing phone number"
    MISSING_LINKEDIN = "Missing LinkedIn profile"
    MISSING_LOCATION = "Missing location"
    EXPERIENCE_MISSING = "Work experience section is missing or too short"
    EXPERIENCE_NOT_QUANTIFIED = "No quantifiable achievements in experience"
    EXPERIENCE_FEW_BULLETS = "Too few bullet points in experience"
    EXPERIENCE_WEAK_VERBS = "Weak action verbs in experience"
    SUMMARY_MISSING = "Professional summary is missing or too short"
    SUMMARY_NOT_QUANTIFIED = "Summary lacks quantifiable achievements"
    SUMMARY_TOO_LONG = "Summary is too long"
    SKILLS_MISSING = "Skills section is missing or too short"
    SKILLS_FEW_INDUSTRY_KEYWORDS = "Few industry-specific skills listed"
    SKILLS_NO_SOFT_SKILLS = "No communication or leadership skills listed"
    EDUCATION_MISSING = "Education section is missing or too short"
    EDUCATION_MISSING_DATES = "Missing graduation dates"

    @property
    def template(self) -> "IssueTemplate":
        return ISSUE_TEMPLATES[self]


@dataclass(frozen=True)
class IssueTemplate:
    section: str
    slug: str
    title: str
    description: str
    before: str
    after: str
    # When set, the first long sentence of the section replaces ``before``.
    uses_excerpt: bool = False


ISSUE_TEMPLATES: dict[IssueKind, IssueTemplate] = {
    IssueKind.MISSING_EMAIL: IssueTemplate(
        section="contact",
        slug="contact-email",
        title="Add a professional email address",
        description="Recruiters and ATS systems need an email address to contact you.",
        before="John Smith | Software Developer",
        after="John Smith | Software Developer | john.smith@email.com",
    ),
    IssueKind.MISSING_PHONE: IssueTemplate(
        section="contact",
        slug="contact-phone",
        title="Add a phone number",
        description="Include a phone number with the country code so employers can reach you quickly.",
        before="john.smith@email.com",
        after="john.smith@email.com | +1 555 234 5678",
    ),
    IssueKind.MISSING_LINKEDIN: IssueTemplate(
        section="contact",
        slug="contact-linkedin",
        title="Add your LinkedIn profile",
        description="A LinkedIn URL lets recruiters verify your experience and network.",
        before="john.smith@email.com | +1 555 234 5678",
        after="john.smith@email.com | +1 555 234 5678 | linkedin.com/in/johnsmith",
    ),
    IssueKind.MISSING_LOCATION: IssueTemplate(
        section="contact",
        slug="contact-location",
        title="Add your location",
        description="State your city and country so employers can check commute or relocation needs.",
        before="john.smith@email.com | +1 555 234 5678",
        after="London, United Kingdom | john.smith@email.com | +1 555 234 5678",
    ),
    IssueKind.EXPERIENCE_MISSING: IssueTemplate(
        section="experience",
        slug="experience-missing",
        title="Add a detailed work experience section",
        description="List your roles with employer, dates and three to five achievement bullets each.",
        before="Developer at Tech Corp",
        after="Software Developer, Tech Corp (2019 - 2023)\n- Delivered 12 features used by 40,000 customers",
    ),
    IssueKind.EXPERIENCE_NOT_QUANTIFIED: IssueTemplate(
        section="experience",
        slug="experience-metrics",
        title="Add quantifiable achievements",
        description="Include specific metrics and numbers to demonstrate your impact.",
        before="Improved the checkout process for customers",
        after="Redesigned the checkout process, cutting cart abandonment by 18% and adding $120K in yearly revenue",
        uses_excerpt=True,
    ),
    IssueKind.EXPERIENCE_FEW_BULLETS: IssueTemplate(
        section="experience",
        slug="experience-bullets",
        title="Use bullet points for achievements",
        description="Bullet points make each role easy to scan for recruiters and ATS parsers.",
        before="Responsible for the website, the mobile app and supporting the sales team with demos.",
        after="- Rebuilt the company website\n- Launched the mobile app\n- Ran 30+ product demos for the sales team",
        uses_excerpt=True,
    ),
    IssueKind.EXPERIENCE_WEAK_VERBS: IssueTemplate(
        section="experience",
        slug="experience-verbs",
        title="Use stronger action verbs",
        description="Replace weak verbs with powerful action words that showcase leadership.",
        before="Worked on developing new features",
        after="Spearheaded development of innovative features that increased user engagement by 25%",
    ),
    IssueKind.SUMMARY_MISSING: IssueTemplate(
        section="summary",
        slug="summary-missing",
        title="Write a professional summary",
        description="Open with two or three sentences covering your role, experience and strongest results.",
        before="Looking for a job.",
        after="Software engineer with 5+ years of experience building web platforms used by 100,000+ users.",
    ),
    IssueKind.SUMMARY_NOT_QUANTIFIED: IssueTemplate(
        section="summary",
        slug="summary-metrics",
        title="Quantify your summary",
        description="Add years of experience or a headline result to make the summary concrete.",
        before="Experienced software engineer with strong programming skills",
        after="Software engineer with 5+ years experience, delivering 20+ projects that improved system efficiency by 40%",
        uses_excerpt=True,
    ),
    IssueKind.SUMMARY_TOO_LONG: IssueTemplate(
        section="summary",
        slug="summary-length",
        title="Shorten your summary",
        description="Keep the summary under 300 characters so it can be read at a glance.",
        before="A long paragraph describing every role, tool and responsibility held over the last decade...",
        after="Product designer with 8 years of experience shipping mobile apps for fintech and retail brands.",
        uses_excerpt=True,
    ),
    IssueKind.SKILLS_MISSING: IssueTemplate(
        section="skills",
        slug="skills-missing",
        title="Add a skills section",
        description="A dedicated skills section is one of the first places ATS systems look for keywords.",
        before="(no skills section)",
        after="Skills: JavaScript, React, Node.js, SQL, Communication, Leadership",
    ),
    IssueKind.SKILLS_FEW_INDUSTRY_KEYWORDS: IssueTemplate(
        section="skills",
        slug="skills-industry",
        title="Add industry-specific keywords",
        description="Include the core skills of your target industry to improve ATS compatibility.",
        before="Programming, databases, web development",
        after="JavaScript, React, Node.js, MongoDB, RESTful APIs, Microservices Architecture",
    ),
    IssueKind.SKILLS_NO_SOFT_SKILLS: IssueTemplate(
        section="skills",
        slug="skills-soft",
        title="Highlight communication and leadership",
        description="Employers screen for soft skills; name them explicitly in your skills section.",
        before="Python, SQL, Docker",
        after="Python, SQL, Docker, Communication, Leadership, Stakeholder Management",
    ),
    IssueKind.EDUCATION_MISSING: IssueTemplate(
        section="education",
        slug="education-missing",
        title="Add your education",
        description="List your highest qualification with the institution and graduation year.",
        before="(no education section)",
        after="BSc Computer Science, University of Cape Town, 2018",
    ),
    IssueKind.EDUCATION_MISSING_DATES: IssueTemplate(
        section="education",
        slug="education-dates",
        title="Add graduation dates",
        description="ATS systems use graduation years to calculate experience levels.",
        before="BSc Computer Science, University of Cape Town",
        after="BSc Computer Science, University of Cape Town, 2018",
    ),
}
