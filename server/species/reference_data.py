"""
Fixed fish species reference list loaded by the species seeder.

Sizes are typical lengths in inches; season months are 1-12 and may wrap
the year end.
"""

FISH_SPECIES_FIELDS = (
    'common_name',
    'scientific_name',
    'water_type',
    'region',
    'min_size',
    'max_size',
    'season_start',
    'season_end',
    'regulation_notes',
)

FISH_SPECIES = [
    # Freshwater - Popular Game Fish
    ('Largemouth Bass', 'Micropterus salmoides', 'Fresh', 'North America', 12, 25, 3, 11,
     'Check local regulations for size and bag limits'),
    ('Smallmouth Bass', 'Micropterus dolomieu', 'Fresh', 'North America', 8, 20, 3, 11,
     'Popular sport fish, check size limits'),
    ('Northern Pike', 'Esox lucius', 'Fresh', 'Northern regions', 18, 40, 5, 3,
     'Season may span winter months'),
    ('Walleye', 'Sander vitreus', 'Fresh', 'Great Lakes region', 12, 20, 4, 11,
     'Excellent eating, check bag limits'),
    ('Muskellunge', 'Esox masquinongy', 'Fresh', 'Great Lakes region', 30, 50, 6, 11,
     'Catch and release recommended'),
    ('Chain Pickerel', 'Esox niger', 'Fresh', 'Eastern US', 10, 20, 4, 10,
     'Year-round season in many areas'),
    # Freshwater - Panfish
    ('Bluegill', 'Lepomis macrochirus', 'Fresh', 'North America', 4, 10, 5, 9,
     'Great for beginners, year-round in many areas'),
    ('Black Crappie', 'Pomoxis nigromaculatus', 'Fresh', 'North America', 6, 12, 3, 5,
     'Best during spring spawn'),
    ('White Crappie', 'Pomoxis annularis', 'Fresh', 'North America', 6, 12, 3, 5,
     'Similar to black crappie'),
    ('Redear Sunfish', 'Lepomis microlophus', 'Fresh', 'Southern US', 4, 8, 4, 9,
     'Also called shellcracker'),
    ('Rock Bass', 'Ambloplites rupestris', 'Fresh', 'Eastern North America', 4, 8, 5, 9,
     'Year-round season'),
    # Freshwater - Catfish
    ('Channel Catfish', 'Ictalurus punctatus', 'Fresh', 'North America', 12, 30, 1, 12,
     'Year-round fishing'),
    ('Blue Catfish', 'Ictalurus furcatus', 'Fresh', 'Southern US', 20, 40, 1, 12,
     'Large specimens, year-round'),
    ('Flathead Catfish', 'Pylodictis olivaris', 'Fresh', 'Central US', 15, 40, 1, 12,
     'Trophy fish, year-round'),
    ('White Catfish', 'Ameiurus catus', 'Fresh', 'Eastern US', 8, 18, 1, 12,
     'Year-round fishing'),
    # Freshwater - Trout
    ('Rainbow Trout', 'Oncorhynchus mykiss', 'Fresh', 'Widely stocked', 8, 16, 4, 10,
     'Check trout stamp requirements'),
    ('Brown Trout', 'Salmo trutta', 'Fresh', 'Cool waters', 8, 20, 4, 10,
     'Often catch and release'),
    ('Brook Trout', 'Salvelinus fontinalis', 'Fresh', 'Eastern mountains', 6, 14, 4, 10,
     'Native species protection'),
    ('Lake Trout', 'Salvelinus namaycush', 'Fresh', 'Great Lakes', 15, 30, 5, 9,
     'Deep water fishing'),
    # Freshwater - Other Popular
    ('White Bass', 'Morone chrysops', 'Fresh', 'Central US', 8, 15, 4, 6,
     'School fish, spring runs'),
    ('Yellow Perch', 'Perca flavescens', 'Fresh', 'Northern US', 6, 12, 4, 11,
     'Excellent eating'),
    ('Sauger', 'Sander canadensis', 'Fresh', 'Great Lakes region', 8, 15, 4, 11,
     'Similar to walleye'),
    ('Common Carp', 'Cyprinus carpio', 'Fresh', 'Widespread', 12, 30, 1, 12,
     'Year-round, no limits typically'),
    ('Longnose Gar', 'Lepisosteus osseus', 'Fresh', 'Central and Eastern US', 18, 36, 1, 12,
     'Primitive species, year-round'),
    # Saltwater and freshwater
    ('Striped Bass', 'Morone saxatilis', 'Both', 'Atlantic and Pacific coasts', 18, 35, 4, 11,
     'Size and bag limits vary by state'),
    # Saltwater - Inshore/Nearshore
    ('Red Snapper', 'Lutjanus campechanus', 'Salt', 'Gulf of Mexico', 12, 25, 6, 7,
     'Highly regulated, limited season'),
    ('Red Grouper', 'Epinephelus morio', 'Salt', 'Atlantic and Gulf', 15, 40, 1, 12,
     'Size limits enforced'),
    ('Summer Flounder', 'Paralichthys dentatus', 'Salt', 'Atlantic coast', 10, 20, 5, 10,
     'Flatfish, size limits vary'),
    ('Redfish', 'Sciaenops ocellatus', 'Salt', 'Gulf and Atlantic coasts', 18, 30, 1, 12,
     'Slot limits in many areas'),
    ('Speckled Trout', 'Cynoscion nebulosus', 'Salt', 'Gulf and Atlantic coasts', 12, 20, 1, 12,
     'Popular inshore species'),
    ('Black Drum', 'Pogonias cromis', 'Salt', 'Atlantic and Gulf coasts', 12, 30, 1, 12,
     'Year-round fishing'),
    ('Sheepshead', 'Archosargus probatocephalus', 'Salt', 'Atlantic and Gulf coasts', 8, 16, 1, 12,
     'Structure fish, year-round'),
    ('Tarpon', 'Megalops atlanticus', 'Salt', 'Gulf and Atlantic coasts', 36, 80, 5, 9,
     'Catch and release only'),
    ('Snook', 'Centropomus undecimalis', 'Salt', 'Florida', 18, 35, 9, 11,
     'Closed season protection'),
    # Saltwater - Offshore
    ('King Mackerel', 'Scomberomorus cavalla', 'Salt', 'Atlantic and Gulf', 20, 40, 3, 11,
     'Seasonal migrations'),
    ('Spanish Mackerel', 'Scomberomorus maculatus', 'Salt', 'Atlantic and Gulf', 10, 20, 4, 10,
     'Smaller than king mackerel'),
    ('Cobia', 'Rachycentron canadum', 'Salt', 'Atlantic and Gulf', 25, 50, 4, 10,
     'Excellent eating'),
    ('Mahi Mahi', 'Coryphaena hippurus', 'Salt', 'Offshore Atlantic and Gulf', 20, 40, 4, 10,
     'Pelagic species'),
    ('Yellowfin Tuna', 'Thunnus albacares', 'Salt', 'Offshore Atlantic and Gulf', 25, 60, 1, 12,
     'Deep water fishing'),
    ('Blackfin Tuna', 'Thunnus atlanticus', 'Salt', 'Atlantic', 15, 25, 1, 12,
     'Smaller tuna species'),
    ('Wahoo', 'Acanthocybium solandri', 'Salt', 'Offshore Atlantic and Gulf', 30, 60, 1, 12,
     'Fast pelagic species'),
    ('Atlantic Sailfish', 'Istiophorus platypterus', 'Salt', 'Atlantic', 60, 100, 1, 12,
     'Catch and release billfish'),
    ('Blue Marlin', 'Makaira nigricans', 'Salt', 'Atlantic', 80, 150, 1, 12,
     'Catch and release billfish'),
    # Saltwater - Sharks & Rays
    ('Blacktip Shark', 'Carcharhinus limbatus', 'Salt', 'Atlantic and Gulf', 24, 60, 1, 12,
     'Shark regulations apply'),
    ('Bull Shark', 'Carcharhinus leucas', 'Salt', 'Atlantic and Gulf', 36, 96, 1, 12,
     'Large predator species'),
    ('Hammerhead Shark', 'Sphyrna lewini', 'Salt', 'Atlantic and Gulf', 36, 120, 1, 12,
     'Protected species in some areas'),
    ('Southern Stingray', 'Dasyatis americana', 'Salt', 'Atlantic and Gulf', 12, 60, 1, 12,
     'Handle with care'),
    # Saltwater - Bottom Fish
    ('Vermillion Snapper', 'Rhomboplites aurorubens', 'Salt', 'Gulf and Atlantic', 8, 16, 1, 12,
     'Deep water bottom fish'),
    ('Gray Triggerfish', 'Balistes capriscus', 'Salt', 'Atlantic and Gulf', 8, 15, 1, 12,
     'Regulated in federal waters'),
    ('Greater Amberjack', 'Seriola dumerili', 'Salt', 'Atlantic and Gulf', 20, 50, 5, 7,
     'Closed season during spawn'),
]
