"""
Story Prompts
아이디어/본문 생성 프롬프트
"""

from typing import Sequence

IDEA_COUNT = 5
MAX_IDEA_TITLE_WORDS = 10

IDEA_PROMPT_TEMPLATE = (
    "Generate {count} bedtime story ideas for {name}, who is {age} years old "
    "and interested in {interests}. Each story idea should be child-appropriate, "
    "engaging, and suitable for bedtime reading. Each idea should have a unique id, "
    "a title of no more than {max_title_words} words, and a description."
)

AVOID_TITLES_TEMPLATE = (
    "\n\nHere are some story titles that are already taken, "
    "you should avoid using them: {titles}"
)

STORY_PROMPT_TEMPLATE = """Write a bedtime story titled "{title}" based on this description: {description}. This story is for {name} who is {age} years old and likes {interests}. The story should:
- Be appropriate for a child's bedtime reading
- Be around 800-1000 words.
- Very strict: No more than 5000 characters! Make it shorter if needed!
- Have a clear beginning, middle, and end
- Include a positive message or moral
- Use age-appropriate language and concepts
- Encourage imagination and wonder
- End with a calm, peaceful conclusion suitable for bedtime

Format the story with proper paragraphs and include a couple of sentences of dialogue where appropriate. Make it engaging, but calming - perfect for bedtime."""


def build_idea_prompt(
    name: str, age: int, interests: str, existing_titles: Sequence[str] = ()
) -> str:
    prompt = IDEA_PROMPT_TEMPLATE.format(
        count=IDEA_COUNT,
        name=name,
        age=age,
        interests=interests,
        max_title_words=MAX_IDEA_TITLE_WORDS,
    )
    if existing_titles:
        prompt += AVOID_TITLES_TEMPLATE.format(titles=", ".join(existing_titles))
    return prompt


def build_story_prompt(
    title: str, description: str, name: str, age: int, interests: str
) -> str:
    return STORY_PROMPT_TEMPLATE.format(
        title=title,
        description=description,
        name=name,
        age=age,
        interests=interests,
    )
