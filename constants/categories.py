"""
Grocery Category Constants

Contains the grocery aisle categories and the keyword lexicon used to
classify ingredient names into them.
"""

# Aisle categories in display order (Other is the catch-all)
GROCERY_CATEGORIES = (
    'Produce',
    'Dairy',
    'Meat & Seafood',
    'Bakery',
    'Pantry',
    'Frozen',
    'Beverages',
    'Snacks',
    'Condiments',
    'Other',
)

DEFAULT_CATEGORY = 'Other'

# Category -> keywords matched by substring containment. Checked in this
# order, so a name matching several categories lands in the first one.
CATEGORY_KEYWORDS = {
    'Produce': (
        'apple', 'banana', 'orange', 'lemon', 'lime', 'grape', 'berry', 'berries',
        'tomato', 'tomatoes', 'cucumber', 'lettuce', 'spinach', 'kale', 'arugula',
        'broccoli', 'cauliflower', 'carrot', 'carrots', 'celery', 'onion', 'onions',
        'garlic', 'ginger', 'pepper', 'peppers', 'zucchini', 'squash', 'potato',
        'potatoes', 'sweet potato', 'mushroom', 'mushrooms', 'avocado', 'mango',
        'pineapple', 'strawberry', 'blueberry', 'raspberry', 'peach', 'pear',
        'watermelon', 'melon', 'corn', 'peas', 'green beans', 'asparagus', 'artichoke',
        'beet', 'beets', 'radish', 'leek', 'shallot', 'herbs', 'basil', 'cilantro',
        'parsley', 'mint', 'thyme', 'rosemary', 'sage', 'dill', 'scallion',
    ),
    'Dairy': (
        'milk', 'cream', 'half and half', 'butter', 'cheese', 'cheddar', 'mozzarella',
        'parmesan', 'feta', 'brie', 'gouda', 'swiss', 'yogurt', 'greek yogurt',
        'sour cream', 'cream cheese', 'cottage cheese', 'ricotta', 'whipped cream',
        'heavy cream', 'almond milk', 'oat milk', 'soy milk',
    ),
    'Meat & Seafood': (
        'chicken', 'beef', 'steak', 'ground beef', 'pork', 'bacon', 'ham', 'sausage',
        'turkey', 'lamb', 'veal', 'duck', 'salmon', 'tuna', 'tilapia', 'cod',
        'shrimp', 'lobster', 'crab', 'scallop', 'fish', 'seafood', 'meatball',
        'chicken breast', 'chicken thigh', 'ground turkey', 'hot dog',
    ),
    'Bakery': (
        'bread', 'baguette', 'roll', 'bun', 'bagel', 'muffin', 'croissant',
        'tortilla', 'wrap', 'pita', 'naan', 'sourdough', 'brioche', 'rye',
        'whole wheat bread', 'english muffin',
    ),
    'Pantry': (
        'rice', 'pasta', 'noodle', 'quinoa', 'oats', 'oatmeal', 'flour', 'sugar',
        'salt', 'pepper', 'oil', 'olive oil', 'vegetable oil', 'coconut oil',
        'vinegar', 'soy sauce', 'hot sauce', 'ketchup', 'mustard', 'mayo',
        'mayonnaise', 'honey', 'maple syrup', 'vanilla', 'baking powder', 'baking soda',
        'yeast', 'cornstarch', 'almond flour', 'breadcrumbs', 'panko', 'beans',
        'lentils', 'chickpeas', 'black beans', 'kidney beans', 'canned tomatoes',
        'tomato paste', 'chicken broth', 'beef broth', 'vegetable broth', 'coconut milk',
        'peanut butter', 'almond butter', 'tahini', 'jam', 'jelly', 'cereal',
        'granola', 'protein powder', 'nuts', 'almonds', 'walnuts', 'cashews',
        'peanuts', 'seeds', 'chia', 'flax', 'sunflower', 'pumpkin seeds',
    ),
    'Frozen': (
        'frozen', 'ice cream', 'popsicle', 'frozen vegetables', 'frozen fruit',
        'frozen pizza', 'edamame', 'frozen peas', 'frozen corn',
    ),
    'Beverages': (
        'juice', 'water', 'sparkling water', 'soda', 'coffee', 'tea', 'energy drink',
        'sports drink', 'kombucha', 'wine', 'beer', 'almond milk',
    ),
    'Snacks': (
        'chip', 'chips', 'cracker', 'crackers', 'popcorn', 'pretzel', 'pretzels',
        'cookie', 'cookies', 'chocolate', 'candy', 'gummy', 'bar', 'protein bar',
        'granola bar', 'rice cake',
    ),
    'Condiments': (
        'dressing', 'salsa', 'guacamole', 'relish', 'worcestershire', 'oyster sauce',
        'fish sauce', 'sriracha', 'tabasco', 'bbq sauce', 'teriyaki', 'aioli',
        'hummus', 'tzatziki',
    ),
}
