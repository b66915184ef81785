"""
Management command to create sample data for testing the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 4 users (admin, alice, bob, charlie), each with a reward account
- 4 stores with different per-visit rewards
- Check-ins, so users start with balances, levels and history
- A coin transfer between alice and bob (and the address book entry it creates)
- Favorite stores and announcements
- An NFT catalog with a few awards
- Notifications
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from datetime import timedelta

from apps.accounts.models import User
from apps.coins.models import CoinTransfer, AddressBookEntry
from apps.coins.services import transfer_coins
from apps.collectibles.models import NftItem, UserNft, NftCategory, NftRarity
from apps.collectibles.services import award_nft
from apps.notifications.models import Notification, NotificationType
from apps.notifications.services import create_notification
from apps.rewards.models import Account, Visit, RewardTransaction
from apps.rewards.services import check_in
from apps.stores.models import Store, FavoriteStore, Announcement
from apps.stores.services import create_store, add_favorite


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        stores = self.create_stores()
        self.create_visits(users, stores)
        self.create_transfers(users)
        self.create_announcements(users, stores)
        self.create_nfts(users)
        self.create_notifications(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  alice@example.com / password123')
        self.stdout.write('  bob@example.com / password123')
        self.stdout.write('  charlie@example.com / password123')
        self.stdout.write('')
        self.stdout.write('Store scan codes:')
        for store in stores.values():
            self.stdout.write(f'  {store.name}: {store.scan_code}')

    def clear_data(self):
        """Clear all data from the database."""
        CoinTransfer.objects.all().delete()
        AddressBookEntry.objects.all().delete()
        UserNft.objects.all().delete()
        NftItem.objects.all().delete()
        Notification.objects.all().delete()
        RewardTransaction.objects.all().delete()
        # Visits protect their store
        Visit.objects.all().delete()
        Announcement.objects.all().delete()
        FavoriteStore.objects.all().delete()
        Store.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        specs = [
            ('admin', 'admin@example.com', 'Admin User', 'admin123', True),
            ('alice', 'alice@example.com', 'Alice', 'password123', False),
            ('bob', 'bob@example.com', 'Bob', 'password123', False),
            ('charlie', 'charlie@example.com', 'Charlie', 'password123', False),
        ]

        users = {}
        for key, email, display_name, password, is_admin in specs:
            user = User.objects.filter(email=email).first()
            if user is None:
                user = User.objects.create_user(
                    email=email,
                    password=password,
                    display_name=display_name,
                    is_staff=is_admin,
                    is_superuser=is_admin,
                )
            # Accounts of users created before the rewards app existed
            Account.objects.get_or_create(user=user)
            users[key] = user

        return users

    def create_stores(self):
        """Create participating stores."""
        self.stdout.write('  Creating stores...')

        specs = [
            ('Corner Cafe', '1 Main Street', 50, 50, 10, 0),
            ('Book Nook', '22 River Road', 30, 80, 5, 0),
            ('Green Grocer', '5 Market Square', 40, 40, 15, 1),
            ('Flagship Store', '100 Central Avenue', 120, 200, 25, 2),
        ]

        stores = {}
        for name, address, experience, loyalty, coins, gems in specs:
            store = Store.objects.filter(name=name).first()
            if store is None:
                store = create_store(
                    name=name,
                    address=address,
                    experience_per_visit=experience,
                    loyalty_per_visit=loyalty,
                    coins_per_visit=coins,
                    gems_per_visit=gems,
                )
            stores[name] = store

        return stores

    def create_visits(self, users, stores):
        """Check users in so they start with balances and history."""
        self.stdout.write('  Creating check-ins...')

        plan = {
            'alice': ['Corner Cafe', 'Corner Cafe', 'Flagship Store', 'Green Grocer'],
            'bob': ['Book Nook', 'Corner Cafe'],
            'charlie': ['Green Grocer'],
        }
        for key, store_names in plan.items():
            for name in store_names:
                check_in(user=users[key], scan_code=stores[name].scan_code)

    def create_transfers(self, users):
        """Send coins from alice to bob."""
        self.stdout.write('  Creating coin transfers...')

        transfer_coins(
            from_user_id=users['alice'].id,
            to_user_id=users['bob'].id,
            amount=15,
            message='Coffee is on me',
        )

    def create_announcements(self, users, stores):
        """Create favorites and announcements."""
        self.stdout.write('  Creating announcements...')

        add_favorite(user=users['alice'], store_id=stores['Corner Cafe'].id)
        add_favorite(user=users['bob'], store_id=stores['Book Nook'].id)

        if Announcement.objects.exists():
            return

        now = timezone.now()
        Announcement.objects.create(
            title='Welcome!',
            content='Scan the QR code at any participating store to earn rewards.',
            priority=10,
            created_by=users['admin'],
        )
        Announcement.objects.create(
            store=stores['Corner Cafe'],
            title='Double coins weekend',
            content='Visit this weekend for a treat.',
            priority=5,
            end_date=now + timedelta(days=7),
            created_by=users['admin'],
        )
        Announcement.objects.create(
            store=stores['Book Nook'],
            title='Summer reading',
            content='New arrivals every Monday.',
            priority=1,
            created_by=users['admin'],
        )

    def create_nfts(self, users):
        """Create an NFT catalog and award a few items."""
        self.stdout.write('  Creating NFTs...')

        specs = [
            ('First Steps', 'Reached level 2', NftCategory.LEVELUP, NftRarity.COMMON),
            ('Regular', 'Checked in ten times', NftCategory.ACHIEVEMENT, NftRarity.RARE),
            ('Launch Party', 'Joined during launch week', NftCategory.EVENT, NftRarity.EPIC),
            ('Founder', 'One of the first members', NftCategory.SPECIAL, NftRarity.LEGENDARY),
        ]

        nfts = {}
        for name, description, category, rarity in specs:
            nft, _ = NftItem.objects.get_or_create(
                name=name,
                defaults={
                    'description': description,
                    'category': category,
                    'rarity': rarity,
                }
            )
            nfts[name] = nft

        if not UserNft.objects.filter(user=users['alice']).exists():
            award_nft(user_id=users['alice'].id, nft_id=nfts['First Steps'].id, reason='Level up')
            award_nft(
                user_id=users['alice'].id,
                nft_id=nfts['Launch Party'].id,
                reason='Launch week',
                metadata={'edition': 1},
            )

    def create_notifications(self, users):
        """Create a welcome notification per user."""
        self.stdout.write('  Creating notifications...')

        for key in ['alice', 'bob', 'charlie']:
            user = users[key]
            if Notification.objects.filter(user=user, title='Welcome').exists():
                continue
            create_notification(
                user=user,
                title='Welcome',
                message='Thanks for joining. Check in at a store to start earning.',
                type=NotificationType.INFO,
            )
