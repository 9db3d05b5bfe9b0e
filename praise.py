import random

PRAISE_MESSAGES = {
    'expense': [
        "Writing it down is the first step, nicely done",
        "Spending with intention takes real discipline",
        "Every entry is an investment in your future",
        "Keeping the habit shows more grit than you think",
    ],
    'savings': [
        "Another step toward the goal, be proud of that",
        "Saving consistently is hard and you are doing it",
        "The effort will pay off",
        "Every bit set aside is a promise to yourself",
    ],
    'work': [
        "This one deserves to be remembered",
        "Knowing your own value is a skill in itself",
        "Your effort and talent are all here",
        "Every breakthrough makes you stronger",
    ],
    'study': [
        "Keep learning, it shows",
        "Today's effort is tomorrow's confidence",
        "Knowledge never lets you down",
        "You are not alone on this road",
    ],
    'sidejob': [
        "Your work paid off, and that is great",
        "Getting recognised for your skills feels good, you earned it",
        "Side hustle life looks good on you",
        "Every payment proves what you can do",
    ],
    'goal_reached': [
        "Goal reached! You proved you could",
        "You said it and you did it",
        "Stronger today than yesterday",
        "You deserve this feeling",
    ],
    'streak': [
        "Your consistency is remarkable",
        "The habit is taking hold",
        "Every day of practice shapes a better you",
        "Small steps add up to a long way",
    ],
    'general': [
        "Good work today",
        "You are doing better than you think",
        "Slow and steady",
        "Trust the process, trust yourself",
    ],
}


def get_praise(category, rng=random):
    messages = PRAISE_MESSAGES.get(category) or PRAISE_MESSAGES['general']
    return rng.choice(messages)


def get_achievement_praise(kind, value, rng=random):
    if kind == 'savings':
        if value >= 1000000:
            return "One million! Your persistence made it real"
        if value >= 500000:
            return "Half a million, you are on the right track"
        if value >= 100000:
            return "A hundred thousand, keep going"
        return get_praise('savings', rng)

    if kind == 'streak':
        if value >= 30:
            return "30 days! A whole month of practice"
        if value >= 14:
            return "Two weeks, the habit is forming"
        if value >= 7:
            return "One full week, a great start"
        return get_praise('streak', rng)

    if kind == 'income':
        if value >= 500000:
            return "Half a million earned, your skills are clearly valued"
        if value >= 100000:
            return "A hundred thousand earned on the side, well done"
        return get_praise('sidejob', rng)

    return get_praise('general', rng)
