SUCCESS_MESSAGE_TEMPLATE = '<div class="bg-green-100 text-green-700 p-4 rounded mb-4">{message}</div>\n'

ADMIN_FORM_TEMPLATE = """
<h2 class="text-2xl font-bold mb-6 fira-code">SEO Settings</h2>

<form method="POST" class="space-y-6">
    <input type="hidden" name="action" value="save_seo_settings">

    <div>
        <label class="block font-medium mb-1">Site Title</label>
        <input type="text" name="site_title" value="{site_title}"
               class="w-full border rounded px-3 py-2">
        <p class="text-sm text-gray-600 mt-1">The name of your website (used as default title and in meta tags)</p>
    </div>

    <div>
        <label class="block font-medium mb-1">Site Description</label>
        <textarea name="site_description" rows="3"
                  class="w-full border rounded px-3 py-2">{site_description}</textarea>
        <p class="text-sm text-gray-600 mt-1">A short description of your website (used in meta description)</p>
    </div>

    <div class="grid grid-cols-2 gap-4">
        <div>
            <label class="block font-medium mb-1">Title Separator</label>
            <input type="text" name="title_separator" value="{title_separator}"
                   class="w-full border rounded px-3 py-2">
            <p class="text-sm text-gray-600 mt-1">Character used between page title and site title</p>
        </div>

        <div>
            <label class="block font-medium mb-1">Append Site Title</label>
            <div class="mt-2">
                <input type="checkbox" name="append_site_title" id="append_site_title" {append_checked}>
                <label for="append_site_title">Add site title after page title</label>
            </div>
            <p class="text-sm text-gray-600 mt-1">Example: Page Title {title_separator} {site_title}</p>
        </div>
    </div>

    <div>
        <label class="block font-medium mb-1">Default Social Image URL</label>
        <input type="text" name="social_image" value="{social_image}"
               class="w-full border rounded px-3 py-2">
        <p class="text-sm text-gray-600 mt-1">Image used when sharing on social media (absolute URL recommended)</p>
    </div>

    <div>
        <button type="submit" class="bg-green-500 hover:bg-green-600 text-white px-4 py-2 rounded">
            Save Settings
        </button>
    </div>
</form>

<div class="mt-8 p-4 bg-gray-100 rounded">
    <h3 class="text-lg font-medium mb-2">How to use SEO in your content</h3>
    <p class="mb-2">Add JSON frontmatter to your markdown files to customize SEO for each page:</p>
    <pre class="bg-gray-800 text-white p-3 rounded overflow-x-auto">
&lt;!-- json
{{
    "title": "Your Page Title",
    "description": "Your page description for search engines",
    "social_image": "https://example.com/image.jpg"
}}
--&gt;

# Your Page Content
    </pre>
</div>
"""
