from django.test import SimpleTestCase

from enforcer.dom import Document, contains_password_input


class DocumentEventsTest(SimpleTestCase):

    def setUp(self):
        self.document = Document('<form id="f"><input id="a"></form>')
        self.field = self.document.get_by_id('a')
        self.events = []

    def test_dispatch_reaches_matching_listeners_only(self):
        self.document.add_listener(self.field, 'input', self.events.append)
        self.document.add_listener(self.field, 'keyup', lambda event: self.events.append('keyup'))
        event = self.document.type_into(self.field, 'abc')

        self.assertEqual(self.events, [event])
        self.assertIs(event.target, self.field)
        self.assertEqual(self.document.value(self.field), 'abc')

    def test_remove_listener(self):
        listener = self.document.add_listener(self.field, 'input', self.events.append)
        self.document.remove_listener(listener)
        self.document.dispatch(self.field, 'input')
        self.assertEqual(self.events, [])
        self.assertEqual(self.document.listener_count(), 0)

    def test_submit_can_be_cancelled(self):
        form = self.document.get_by_id('f')
        self.assertTrue(self.document.submit(form))
        self.document.add_listener(form, 'submit', lambda event: event.prevent_default())
        self.assertFalse(self.document.submit(form))

    def test_listener_count_filters(self):
        form = self.document.get_by_id('f')
        self.document.add_listener(self.field, 'input', self.events.append)
        self.document.add_listener(form, 'submit', self.events.append)
        self.assertEqual(self.document.listener_count(), 2)
        self.assertEqual(self.document.listener_count(form), 1)
        self.assertEqual(self.document.listener_count(event_type='input'), 1)


class DocumentRenderingTest(SimpleTestCase):

    def setUp(self):
        self.document = Document('<div id="m" class="note"></div><button id="b">Go</button>')

    def test_classes(self):
        element = self.document.get_by_id('m')
        self.document.add_class(element, 'error', 'note')
        self.assertEqual(self.document.classes(element), ['note', 'error'])
        self.document.remove_class(element, 'note', 'error')
        self.assertNotIn('class', element.attrs)

    def test_text(self):
        element = self.document.get_by_id('m')
        self.document.set_text(element, "Hello")
        self.assertEqual(self.document.text(element), "Hello")
        self.assertEqual(self.document.classes(element), ['note'])

    def test_disabled_flag(self):
        button = self.document.get_by_id('b')
        self.document.set_disabled(button, True)
        self.assertTrue(self.document.is_disabled(button))
        self.document.set_disabled(button, False)
        self.assertFalse(self.document.is_disabled(button))


class DocumentMutationTest(SimpleTestCase):

    def setUp(self):
        self.document = Document('<div id="root"><p>old</p></div>')
        self.root = self.document.get_by_id('root')
        self.batches = []
        self.subscription = self.document.subscribe(self.batches.append)

    def test_append_html_reports_added_elements(self):
        added = self.document.append_html(self.root, 'text <span>a</span><b>b</b>')
        self.assertEqual([tag.name for tag in added], ['span', 'b'])
        self.assertEqual(len(self.batches), 1)
        self.assertEqual(self.batches[0][0].added, added)

    def test_replace_children_reports_removed_elements(self):
        self.document.replace_children(self.root, '<em>new</em>')
        record = self.batches[0][0]
        self.assertEqual([tag.name for tag in record.removed], ['p'])
        self.assertEqual([tag.name for tag in record.added], ['em'])
        self.assertEqual(self.document.text(self.root), 'new')

    def test_cancelled_subscription_is_silent(self):
        self.subscription.cancel()
        self.document.remove(self.root.p)
        self.assertEqual(self.batches, [])

    def test_contains_password_input(self):
        added = self.document.append_html(
            self.root, '<form><input type="password"></form><input type="text"><input type="Password">'
        )
        self.assertTrue(contains_password_input(added[0]))
        self.assertTrue(contains_password_input(added[2]))
        self.assertFalse(contains_password_input(added[1]))
