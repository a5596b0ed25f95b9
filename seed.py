"""
Initial data for a fresh store: the fixed category list and the demo grocery
catalog. Seed ids are small integers; products added later get millisecond ids
so that "newest" sorting still works.
"""

from typing import List

from schemas import Category, Product

CATEGORIES = [
    {"id": "1", "name": "Fruits & Vegetables", "icon": "🥕"},
    {"id": "2", "name": "Dairy & Eggs", "icon": "🥛"},
    {"id": "3", "name": "Meat & Seafood", "icon": "🥩"},
    {"id": "4", "name": "Bakery", "icon": "🍞"},
    {"id": "5", "name": "Beverages", "icon": "🥤"},
    {"id": "6", "name": "Snacks", "icon": "🍿"},
    {"id": "7", "name": "Pantry", "icon": "🥫"},
    {"id": "8", "name": "Frozen Foods", "icon": "🧊"},
    {"id": "9", "name": "Personal Care", "icon": "🧴"},
    {"id": "10", "name": "Household", "icon": "🧽"},
]

PRODUCTS = [
    {
        "id": "1",
        "name": "Fresh Bananas",
        "description": "Premium quality bananas, perfect for breakfast and smoothies",
        "price": 89,
        "category": "Fruits & Vegetables",
        "brand": "Fresh Farm",
        "image": "https://images.pexels.com/photos/2872755/pexels-photo-2872755.jpeg",
        "stock": 50,
        "in_stock": True,
        "rating": 4.5,
        "reviews": 128,
        "tags": ["fresh", "organic", "potassium"],
        "nutrition_info": {"calories": 89, "protein": 1.1, "carbs": 22.8, "fat": 0.3}
    },
    {
        "id": "2",
        "name": "Red Apples",
        "description": "Crisp and sweet red apples, rich in fiber and vitamins",
        "price": 150,
        "category": "Fruits & Vegetables",
        "brand": "Orchard Fresh",
        "image": "https://images.pexels.com/photos/102104/pexels-photo-102104.jpeg",
        "stock": 75,
        "in_stock": True,
        "rating": 4.7,
        "reviews": 95,
        "tags": ["fresh", "vitamin-c", "fiber"],
        "nutrition_info": {"calories": 52, "protein": 0.3, "carbs": 14, "fat": 0.2}
    },
    {
        "id": "3",
        "name": "Fresh Spinach",
        "description": "Organic spinach leaves, perfect for salads and cooking",
        "price": 45,
        "category": "Fruits & Vegetables",
        "brand": "Green Valley",
        "image": "https://images.pexels.com/photos/2325843/pexels-photo-2325843.jpeg",
        "stock": 30,
        "in_stock": True,
        "rating": 4.3,
        "reviews": 67,
        "tags": ["organic", "iron", "leafy-green"],
        "nutrition_info": {"calories": 23, "protein": 2.9, "carbs": 3.6, "fat": 0.4}
    },
    {
        "id": "4",
        "name": "Fresh Tomatoes",
        "description": "Juicy red tomatoes, perfect for cooking and salads",
        "price": 60,
        "category": "Fruits & Vegetables",
        "brand": "Farm Fresh",
        "image": "https://images.pexels.com/photos/533280/pexels-photo-533280.jpeg",
        "stock": 40,
        "in_stock": True,
        "rating": 4.4,
        "reviews": 89,
        "tags": ["fresh", "lycopene", "vitamin-c"],
        "nutrition_info": {"calories": 18, "protein": 0.9, "carbs": 3.9, "fat": 0.2}
    },
    {
        "id": "5",
        "name": "Fresh Carrots",
        "description": "Crunchy orange carrots, rich in beta-carotene",
        "price": 55,
        "category": "Fruits & Vegetables",
        "brand": "Garden Fresh",
        "image": "https://images.pexels.com/photos/143133/pexels-photo-143133.jpeg",
        "stock": 35,
        "in_stock": True,
        "rating": 4.6,
        "reviews": 72,
        "tags": ["fresh", "beta-carotene", "vitamin-a"],
        "nutrition_info": {"calories": 41, "protein": 0.9, "carbs": 9.6, "fat": 0.2}
    },
    {
        "id": "6",
        "name": "Organic Milk",
        "description": "Fresh organic whole milk, 1 liter pack",
        "price": 75,
        "category": "Dairy & Eggs",
        "brand": "Pure Dairy",
        "image": "https://images.pexels.com/photos/248412/pexels-photo-248412.jpeg",
        "stock": 25,
        "in_stock": True,
        "rating": 4.8,
        "reviews": 156,
        "tags": ["organic", "calcium", "protein"],
        "nutrition_info": {"calories": 42, "protein": 3.4, "carbs": 5, "fat": 1}
    },
    {
        "id": "7",
        "name": "Farm Fresh Eggs",
        "description": "Free-range chicken eggs, pack of 12",
        "price": 120,
        "category": "Dairy & Eggs",
        "brand": "Happy Hens",
        "image": "https://images.pexels.com/photos/162712/egg-white-food-protein-162712.jpeg",
        "stock": 45,
        "in_stock": True,
        "rating": 4.7,
        "reviews": 134,
        "tags": ["free-range", "protein", "omega-3"],
        "nutrition_info": {"calories": 155, "protein": 13, "carbs": 1.1, "fat": 11}
    },
    {
        "id": "8",
        "name": "Greek Yogurt",
        "description": "Thick and creamy Greek yogurt, 500g container",
        "price": 180,
        "category": "Dairy & Eggs",
        "brand": "Mediterranean",
        "image": "https://images.pexels.com/photos/1435735/pexels-photo-1435735.jpeg",
        "stock": 20,
        "in_stock": True,
        "rating": 4.6,
        "reviews": 98,
        "tags": ["probiotic", "protein", "calcium"],
        "nutrition_info": {"calories": 59, "protein": 10, "carbs": 3.6, "fat": 0.4}
    },
    {
        "id": "9",
        "name": "Cheddar Cheese",
        "description": "Aged cheddar cheese, 200g block",
        "price": 250,
        "category": "Dairy & Eggs",
        "brand": "Artisan Cheese",
        "image": "https://images.pexels.com/photos/773253/pexels-photo-773253.jpeg",
        "stock": 15,
        "in_stock": True,
        "rating": 4.5,
        "reviews": 76,
        "tags": ["aged", "calcium", "protein"],
        "nutrition_info": {"calories": 113, "protein": 7, "carbs": 1, "fat": 9}
    },
    {
        "id": "10",
        "name": "Fresh Salmon",
        "description": "Atlantic salmon fillet, wild caught, 500g",
        "price": 650,
        "category": "Meat & Seafood",
        "brand": "Ocean Fresh",
        "image": "https://images.pexels.com/photos/1565982/pexels-photo-1565982.jpeg",
        "stock": 15,
        "in_stock": True,
        "rating": 4.9,
        "reviews": 87,
        "tags": ["wild-caught", "omega-3", "protein"],
        "nutrition_info": {"calories": 208, "protein": 20, "carbs": 0, "fat": 13}
    },
    {
        "id": "11",
        "name": "Chicken Breast",
        "description": "Boneless chicken breast, 1kg pack",
        "price": 320,
        "category": "Meat & Seafood",
        "brand": "Farm Chicken",
        "image": "https://images.pexels.com/photos/2338407/pexels-photo-2338407.jpeg",
        "stock": 25,
        "in_stock": True,
        "rating": 4.4,
        "reviews": 112,
        "tags": ["lean", "protein", "boneless"],
        "nutrition_info": {"calories": 165, "protein": 31, "carbs": 0, "fat": 3.6}
    },
    {
        "id": "12",
        "name": "Fresh Prawns",
        "description": "Large prawns, cleaned and deveined, 500g",
        "price": 450,
        "category": "Meat & Seafood",
        "brand": "Coastal Catch",
        "image": "https://images.pexels.com/photos/725991/pexels-photo-725991.jpeg",
        "stock": 12,
        "in_stock": True,
        "rating": 4.6,
        "reviews": 65,
        "tags": ["fresh", "protein", "low-fat"],
        "nutrition_info": {"calories": 99, "protein": 18, "carbs": 0.2, "fat": 1.4}
    },
    {
        "id": "13",
        "name": "Artisan Bread",
        "description": "Fresh baked sourdough bread, 500g loaf",
        "price": 85,
        "category": "Bakery",
        "brand": "Baker's Choice",
        "image": "https://images.pexels.com/photos/1586947/pexels-photo-1586947.jpeg",
        "stock": 20,
        "in_stock": True,
        "rating": 4.7,
        "reviews": 143,
        "tags": ["artisan", "sourdough", "fresh-baked"],
        "nutrition_info": {"calories": 265, "protein": 9, "carbs": 49, "fat": 3.2}
    },
    {
        "id": "14",
        "name": "Chocolate Croissants",
        "description": "Buttery croissants with chocolate filling, pack of 4",
        "price": 160,
        "category": "Bakery",
        "brand": "French Bakery",
        "image": "https://images.pexels.com/photos/2067396/pexels-photo-2067396.jpeg",
        "stock": 18,
        "in_stock": True,
        "rating": 4.8,
        "reviews": 89,
        "tags": ["buttery", "chocolate", "french"],
        "nutrition_info": {"calories": 406, "protein": 8, "carbs": 45, "fat": 21}
    },
    {
        "id": "15",
        "name": "Whole Wheat Bread",
        "description": "Healthy whole wheat bread, 400g loaf",
        "price": 65,
        "category": "Bakery",
        "brand": "Healthy Grains",
        "image": "https://images.pexels.com/photos/1775043/pexels-photo-1775043.jpeg",
        "stock": 30,
        "in_stock": True,
        "rating": 4.3,
        "reviews": 97,
        "tags": ["whole-wheat", "fiber", "healthy"],
        "nutrition_info": {"calories": 247, "protein": 13, "carbs": 41, "fat": 4.2}
    },
    {
        "id": "16",
        "name": "Orange Juice",
        "description": "Fresh squeezed orange juice, no pulp, 1 liter",
        "price": 120,
        "category": "Beverages",
        "brand": "Citrus Fresh",
        "image": "https://images.pexels.com/photos/1640774/pexels-photo-1640774.jpeg",
        "stock": 30,
        "in_stock": True,
        "rating": 4.5,
        "reviews": 156,
        "tags": ["fresh", "vitamin-c", "no-pulp"],
        "nutrition_info": {"calories": 45, "protein": 0.7, "carbs": 10.4, "fat": 0.2}
    },
    {
        "id": "17",
        "name": "Green Tea",
        "description": "Premium green tea bags, pack of 25",
        "price": 180,
        "category": "Beverages",
        "brand": "Tea Garden",
        "image": "https://images.pexels.com/photos/1638280/pexels-photo-1638280.jpeg",
        "stock": 40,
        "in_stock": True,
        "rating": 4.6,
        "reviews": 203,
        "tags": ["antioxidants", "premium", "healthy"],
        "nutrition_info": {"calories": 2, "protein": 0, "carbs": 0, "fat": 0}
    },
    {
        "id": "18",
        "name": "Coconut Water",
        "description": "Natural coconut water, 500ml bottle",
        "price": 45,
        "category": "Beverages",
        "brand": "Tropical Pure",
        "image": "https://images.pexels.com/photos/1435735/pexels-photo-1435735.jpeg",
        "stock": 35,
        "in_stock": True,
        "rating": 4.4,
        "reviews": 124,
        "tags": ["natural", "electrolytes", "hydrating"],
        "nutrition_info": {"calories": 19, "protein": 0.7, "carbs": 3.7, "fat": 0.2}
    },
    {
        "id": "19",
        "name": "Mixed Nuts",
        "description": "Premium mixed nuts, lightly salted, 250g pack",
        "price": 320,
        "category": "Snacks",
        "brand": "Nutty Delights",
        "image": "https://images.pexels.com/photos/1295572/pexels-photo-1295572.jpeg",
        "stock": 40,
        "in_stock": True,
        "rating": 4.7,
        "reviews": 189,
        "tags": ["premium", "protein", "healthy-fats"],
        "nutrition_info": {"calories": 607, "protein": 20, "carbs": 16, "fat": 54}
    },
    {
        "id": "20",
        "name": "Dark Chocolate",
        "description": "70% dark chocolate bar, 100g",
        "price": 150,
        "category": "Snacks",
        "brand": "Cocoa Rich",
        "image": "https://images.pexels.com/photos/918327/pexels-photo-918327.jpeg",
        "stock": 25,
        "in_stock": True,
        "rating": 4.8,
        "reviews": 167,
        "tags": ["dark", "antioxidants", "70%"],
        "nutrition_info": {"calories": 546, "protein": 7.8, "carbs": 46, "fat": 31}
    },
    {
        "id": "21",
        "name": "Potato Chips",
        "description": "Crispy potato chips, classic salted, 150g pack",
        "price": 75,
        "category": "Snacks",
        "brand": "Crispy Bites",
        "image": "https://images.pexels.com/photos/1583884/pexels-photo-1583884.jpeg",
        "stock": 50,
        "in_stock": True,
        "rating": 4.2,
        "reviews": 234,
        "tags": ["crispy", "salted", "classic"],
        "nutrition_info": {"calories": 536, "protein": 6, "carbs": 53, "fat": 34}
    },
    {
        "id": "22",
        "name": "Olive Oil",
        "description": "Extra virgin olive oil, cold pressed, 500ml",
        "price": 450,
        "category": "Pantry",
        "brand": "Mediterranean Gold",
        "image": "https://images.pexels.com/photos/33783/olive-oil-salad-dressing-cooking-olive.jpg",
        "stock": 35,
        "in_stock": True,
        "rating": 4.9,
        "reviews": 145,
        "tags": ["extra-virgin", "cold-pressed", "premium"],
        "nutrition_info": {"calories": 884, "protein": 0, "carbs": 0, "fat": 100}
    },
    {
        "id": "23",
        "name": "Basmati Rice",
        "description": "Premium aged basmati rice, 5kg pack",
        "price": 650,
        "category": "Pantry",
        "brand": "Royal Grains",
        "image": "https://images.pexels.com/photos/723198/pexels-photo-723198.jpeg",
        "stock": 20,
        "in_stock": True,
        "rating": 4.6,
        "reviews": 178,
        "tags": ["basmati", "aged", "premium"],
        "nutrition_info": {"calories": 365, "protein": 7.1, "carbs": 78, "fat": 0.9}
    },
    {
        "id": "24",
        "name": "Pasta",
        "description": "Italian durum wheat pasta, 500g pack",
        "price": 120,
        "category": "Pantry",
        "brand": "Italiano",
        "image": "https://images.pexels.com/photos/1437267/pexels-photo-1437267.jpeg",
        "stock": 45,
        "in_stock": True,
        "rating": 4.4,
        "reviews": 156,
        "tags": ["italian", "durum-wheat", "authentic"],
        "nutrition_info": {"calories": 371, "protein": 13, "carbs": 75, "fat": 1.5}
    },
    {
        "id": "25",
        "name": "Frozen Berries",
        "description": "Mixed frozen berries, 500g pack",
        "price": 280,
        "category": "Frozen Foods",
        "brand": "Arctic Fresh",
        "image": "https://images.pexels.com/photos/1841555/pexels-photo-1841555.jpeg",
        "stock": 22,
        "in_stock": True,
        "rating": 4.5,
        "reviews": 98,
        "tags": ["mixed", "antioxidants", "vitamin-c"],
        "nutrition_info": {"calories": 57, "protein": 0.7, "carbs": 14, "fat": 0.3}
    },
    {
        "id": "26",
        "name": "Frozen Vegetables",
        "description": "Mixed frozen vegetables, 1kg pack",
        "price": 180,
        "category": "Frozen Foods",
        "brand": "Garden Freeze",
        "image": "https://images.pexels.com/photos/1435735/pexels-photo-1435735.jpeg",
        "stock": 30,
        "in_stock": True,
        "rating": 4.3,
        "reviews": 134,
        "tags": ["mixed", "convenient", "nutritious"],
        "nutrition_info": {"calories": 42, "protein": 2.2, "carbs": 8.7, "fat": 0.4}
    },
    {
        "id": "27",
        "name": "Organic Shampoo",
        "description": "Natural organic shampoo for all hair types, 300ml",
        "price": 320,
        "category": "Personal Care",
        "brand": "Nature's Care",
        "image": "https://images.pexels.com/photos/4465124/pexels-photo-4465124.jpeg",
        "stock": 25,
        "in_stock": True,
        "rating": 4.6,
        "reviews": 89,
        "tags": ["organic", "natural", "sulfate-free"],
        "nutrition_info": {"calories": 0, "protein": 0, "carbs": 0, "fat": 0}
    },
    {
        "id": "28",
        "name": "Toothpaste",
        "description": "Fluoride toothpaste for cavity protection, 100g",
        "price": 85,
        "category": "Personal Care",
        "brand": "Dental Pro",
        "image": "https://images.pexels.com/photos/4465124/pexels-photo-4465124.jpeg",
        "stock": 40,
        "in_stock": True,
        "rating": 4.4,
        "reviews": 156,
        "tags": ["fluoride", "cavity-protection", "fresh"],
        "nutrition_info": {"calories": 0, "protein": 0, "carbs": 0, "fat": 0}
    },
    {
        "id": "29",
        "name": "Dish Soap",
        "description": "Concentrated dish soap, lemon scented, 500ml",
        "price": 95,
        "category": "Household",
        "brand": "Clean Master",
        "image": "https://images.pexels.com/photos/4465124/pexels-photo-4465124.jpeg",
        "stock": 35,
        "in_stock": True,
        "rating": 4.3,
        "reviews": 123,
        "tags": ["concentrated", "lemon", "grease-cutting"],
        "nutrition_info": {"calories": 0, "protein": 0, "carbs": 0, "fat": 0}
    },
    {
        "id": "30",
        "name": "Laundry Detergent",
        "description": "Liquid laundry detergent, 1 liter",
        "price": 180,
        "category": "Household",
        "brand": "Fresh Clean",
        "image": "https://images.pexels.com/photos/4465124/pexels-photo-4465124.jpeg",
        "stock": 28,
        "in_stock": True,
        "rating": 4.5,
        "reviews": 167,
        "tags": ["liquid", "stain-removal", "fresh-scent"],
        "nutrition_info": {"calories": 0, "protein": 0, "carbs": 0, "fat": 0}
    },
]


def initial_categories() -> List[Category]:
    return [Category(**c) for c in CATEGORIES]


def initial_products() -> List[Product]:
    return [Product(**p) for p in PRODUCTS]
