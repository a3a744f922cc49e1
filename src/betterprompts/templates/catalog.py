"""Built-in prompt templates, one or more per intent."""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.types import Intent


PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class PromptTemplate:
    """A prompt skeleton with named placeholders."""
    id: str
    name: str
    intent: Intent
    template: str
    description: str
    placeholders: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class IntentLabel:
    """Display metadata for an intent."""
    label: str
    icon: str
    description: str


PROMPT_TEMPLATES: List[PromptTemplate] = [
    # Fix
    PromptTemplate(
        id="fix-bug",
        name="Fix Bug",
        intent=Intent.FIX,
        template="""Fix the bug in this code. The issue is: {issue}

{context}

Please:
1. Identify the root cause of the bug
2. Provide a corrected implementation
3. Explain what was wrong and why the fix works""",
        description="Debug and fix issues in code",
        placeholders=["issue"],
    ),
    PromptTemplate(
        id="fix-error",
        name="Fix Error",
        intent=Intent.FIX,
        template="""I'm getting this error: {error}

{context}

Please help me:
1. Understand what's causing this error
2. Fix the code to resolve it
3. Prevent similar errors in the future""",
        description="Fix specific error messages",
        placeholders=["error"],
    ),

    # Add
    PromptTemplate(
        id="add-feature",
        name="Add Feature",
        intent=Intent.ADD,
        template="""Add the following feature: {feature}

{context}

Requirements:
- Follow existing code patterns and conventions
- Include proper error handling
- Make it production-ready""",
        description="Implement new functionality",
        placeholders=["feature"],
    ),
    PromptTemplate(
        id="add-function",
        name="Add Function",
        intent=Intent.ADD,
        template="""Create a function that: {description}

{context}

Please:
- Use appropriate parameter types
- Include input validation
- Handle edge cases
- Add JSDoc/docstring comments""",
        description="Create a new function",
        placeholders=["description"],
    ),

    # Change
    PromptTemplate(
        id="change-refactor",
        name="Refactor Code",
        intent=Intent.CHANGE,
        template="""Refactor this code to: {goal}

{context}

Guidelines:
- Maintain the same functionality
- Improve code quality and readability
- Follow best practices for this language""",
        description="Improve code structure",
        placeholders=["goal"],
    ),
    PromptTemplate(
        id="change-update",
        name="Update Code",
        intent=Intent.CHANGE,
        template="""Update this code: {changes}

{context}

Please ensure:
- Backward compatibility where possible
- All related code is updated consistently
- No functionality is broken""",
        description="Modify existing code",
        placeholders=["changes"],
    ),

    # Explain
    PromptTemplate(
        id="explain-code",
        name="Explain Code",
        intent=Intent.EXPLAIN,
        template="""Explain this code in detail:

{context}

Please cover:
1. What this code does (high-level overview)
2. How it works (step-by-step breakdown)
3. Key concepts or patterns used
4. Any potential issues or improvements""",
        description="Get detailed code explanation",
    ),
    PromptTemplate(
        id="explain-simple",
        name="Explain Simply",
        intent=Intent.EXPLAIN,
        template="""Explain this code in simple terms that a beginner can understand:

{context}

Use:
- Simple language, avoid jargon
- Analogies where helpful
- Step-by-step breakdown""",
        description="Get beginner-friendly explanation",
    ),

    # Test
    PromptTemplate(
        id="test-unit",
        name="Write Unit Tests",
        intent=Intent.TEST,
        template="""Write unit tests for this code:

{context}

Include tests for:
- Normal/expected inputs
- Edge cases
- Error conditions
- Boundary values

Use the testing framework appropriate for this language/project.""",
        description="Generate unit tests",
    ),
    PromptTemplate(
        id="test-specific",
        name="Test Specific Scenario",
        intent=Intent.TEST,
        template="""Write tests for the following scenario: {scenario}

{context}

Make sure to cover:
- The main scenario
- Related edge cases
- Failure modes""",
        description="Test specific functionality",
        placeholders=["scenario"],
    ),

    # Review
    PromptTemplate(
        id="review-code",
        name="Code Review",
        intent=Intent.REVIEW,
        template="""Review this code for:

{context}

Please check for:
1. Bugs or logic errors
2. Security vulnerabilities
3. Performance issues
4. Code style and best practices
5. Suggestions for improvement""",
        description="Get comprehensive code review",
    ),
    PromptTemplate(
        id="review-security",
        name="Security Review",
        intent=Intent.REVIEW,
        template="""Perform a security review of this code:

{context}

Check for:
- Input validation issues
- Injection vulnerabilities (SQL, XSS, etc.)
- Authentication/authorization flaws
- Data exposure risks
- Other OWASP Top 10 vulnerabilities""",
        description="Focus on security issues",
    ),

    # Improve
    PromptTemplate(
        id="improve-performance",
        name="Improve Performance",
        intent=Intent.IMPROVE,
        template="""Optimize this code for better performance:

{context}

Focus on:
- Reducing time complexity
- Minimizing memory usage
- Eliminating unnecessary operations
- Using more efficient algorithms/data structures""",
        description="Optimize code performance",
    ),
    PromptTemplate(
        id="improve-readability",
        name="Improve Readability",
        intent=Intent.IMPROVE,
        template="""Improve the readability of this code:

{context}

Please:
- Use clearer variable/function names
- Break down complex logic
- Add helpful comments where needed
- Follow language conventions""",
        description="Make code more readable",
    ),

    # Document
    PromptTemplate(
        id="document-code",
        name="Add Documentation",
        intent=Intent.DOCUMENT,
        template="""Add documentation to this code:

{context}

Include:
- Function/method documentation (JSDoc, docstrings, etc.)
- Inline comments for complex logic
- Usage examples where helpful""",
        description="Generate code documentation",
    ),
    PromptTemplate(
        id="document-readme",
        name="Write README",
        intent=Intent.DOCUMENT,
        template="""Write a README for this code/project:

{context}

Include:
- Project description
- Installation instructions
- Usage examples
- API documentation (if applicable)
- Contributing guidelines""",
        description="Create README documentation",
    ),
]


INTENT_LABELS: Dict[Intent, IntentLabel] = {
    Intent.FIX: IntentLabel("Fix", "🔧", "Debug and fix issues"),
    Intent.ADD: IntentLabel("Add", "➕", "Add new features or code"),
    Intent.CHANGE: IntentLabel("Change", "✏️", "Modify existing code"),
    Intent.EXPLAIN: IntentLabel("Explain", "💡", "Understand code"),
    Intent.TEST: IntentLabel("Test", "🧪", "Write tests"),
    Intent.REVIEW: IntentLabel("Review", "👀", "Review code quality"),
    Intent.IMPROVE: IntentLabel("Improve", "⚡", "Optimize and enhance"),
    Intent.DOCUMENT: IntentLabel("Document", "📝", "Add documentation"),
}


def get_templates_by_intent(intent: Intent) -> List[PromptTemplate]:
    """All templates for an intent, in declaration order."""
    return [t for t in PROMPT_TEMPLATES if t.intent == intent]


def get_template_by_id(template_id: str) -> Optional[PromptTemplate]:
    """Look up a template by id. Returns None when not found."""
    for template in PROMPT_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def fill_template(template: PromptTemplate, description: str, context: str) -> str:
    """
    Substitute every placeholder in a single pass.

    `{context}` receives the context block; every other placeholder receives
    the description, so none is left literal in the result.
    """
    def _replace(match: "re.Match[str]") -> str:
        if match.group(1) == "context":
            return context
        return description

    return PLACEHOLDER_PATTERN.sub(_replace, template.template)
