"""Jinja2 template sources for every generated file.

Templates whose names end in ``.php.j2`` or ``.html.j2`` are autoescaped;
the stylesheet and script templates are rendered as plain text.
"""

from __future__ import annotations

PAGE_TEMPLATE = r"""<?php
// ========================================
// CLOUDFLARE + CPANEL CACHE BUSTING
// ========================================

// 1. BYPASS CLOUDFLARE CACHE with specific headers
header("Cache-Control: no-store, no-cache, must-revalidate, max-age=0, s-maxage=0");
header("Cache-Control: post-check=0, pre-check=0", false);
header("Pragma: no-cache");
header("Expires: Sat, 01 Jan 2000 00:00:00 GMT");
header("Last-Modified: " . gmdate("D, d M Y H:i:s") . " GMT");

// 2. Tell Cloudflare NOT to cache this page
header("CF-Cache-Status: BYPASS");
header("CDN-Cache-Control: no-store");

// 3. ADDITIONAL USEFUL HEADERS:

// Prevent proxy caching
header("Surrogate-Control: no-store");

// ETag removal (prevents conditional requests)
header_remove("ETag");
header("ETag: " . md5(microtime()));

// Vary header (tells caches this varies by headers)
header("Vary: *");

// X-Accel-Expires for Nginx reverse proxy
header("X-Accel-Expires: 0");

// Prevent transformation by proxies
header("Cache-Control: no-transform");

// Cloudflare-specific: bypass edge cache
header("Cloudflare-CDN-Cache-Control: no-cache");

// Additional browser cache prevention
header("Cache-Control: private, no-cache, no-store, must-revalidate, max-age=0, s-maxage=0, proxy-revalidate");

// Prevent IE-specific caching
header("X-UA-Compatible: IE=edge");

// Generate cache-busting parameters
$timestamp = time();
$microtime = microtime(true);
$random = mt_rand(100000, 999999);

// Get file modification time
$imagePath = '{{ page.image_path|php_str }}';
$fileTime = file_exists($imagePath) ? filemtime($imagePath) : $timestamp;

// When you want to force refresh, add ?purge=1 to URL
$forcePurge = isset($_GET['purge']) ? '&purge=' . $random : '';

// Combine all cache-busting parameters
$cacheBuster = "v={$timestamp}&t={$microtime}&r={$random}&m={$fileTime}{$forcePurge}";
?>
<!DOCTYPE html>
<html lang="en">

<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta http-equiv="Cache-Control" content="no-cache, no-store, must-revalidate">
    <meta http-equiv="Pragma" content="no-cache">
    <meta http-equiv="Expires" content="0">
    <title>{{ page.display_title }} | {{ project.site_name }}</title>
{% if page.meta_desc %}
    <meta name="description" content="{{ page.meta_desc }}">
{% endif %}
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="https://fonts.googleapis.com/css2?family={{ project.font|font_family }}:wght@100..900&display=swap" rel="stylesheet">
    <link rel="stylesheet" href="./{{ stylesheet }}?<?php echo $cacheBuster; ?>">

    <script>
        // JavaScript cache-busting
        window.addEventListener('load', function() {
            var img = document.querySelector('img');
            if (img) {
                var currentSrc = img.src;
                if (currentSrc.indexOf('?') > -1) {
                    img.src = currentSrc + '&js=' + Date.now();
                }
            }
        });

        // Prevent bfcache
        window.addEventListener('pageshow', function(event) {
            if (event.persisted) {
                window.location.reload();
            }
        });

        // Force hard refresh on manual purge
        if (window.location.search.indexOf('purge=') > -1) {
            console.log('Cache purge mode activated');
        }
    </script>
</head>

<body id="body"{% if single_page %} class="single-page"{% endif %}>
{% if not single_page %}
    <button class="hamburger" aria-label="Toggle menu">
        <span></span>
        <span></span>
        <span></span>
    </button>
    <ul id="site-header">
    {% for item in nav %}
        <li{% if item.active %} class="active"{% endif %}><a href="./{{ item.href }}">{{ item.name }}</a></li>
    {% endfor %}
    {% if menu.back_to_top %}
        <li><a href="#body" title="Back to Top">&uarr;</a></li>
    {% endif %}
    </ul>
{% endif %}

    <!-- Main image with cache-busting -->
    <img src="{{ image_prefix }}<?php echo $imagePath; ?>?<?php echo $cacheBuster; ?>" alt="{{ page.name }}" />

    <!-- Purge button for cache refresh -->
    <a href="?purge=1" class="purge-btn" title="Force cache refresh" style="opacity:0">Force Refresh</a>

    <!-- Debug info -->
    <?php if (isset($_GET['debug'])): ?>
    <div style="position: fixed; top: 10px; right: 10px; background: rgba(0,0,0,0.9); color: #0f0; padding: 15px; font-family: monospace; font-size: 11px; border-radius: 5px; max-width: 300px; z-index: 10000;">
        <strong style="color: {{ colors.primary }};">DEBUG MODE</strong><br><br>
        <strong>Timestamp:</strong> <?php echo $timestamp; ?><br>
        <strong>Microtime:</strong> <?php echo $microtime; ?><br>
        <strong>Random:</strong> <?php echo $random; ?><br>
        <strong>File Modified:</strong> <?php echo date('Y-m-d H:i:s', $fileTime); ?><br>
        <strong>Full URL:</strong><br>
        <div style="word-break: break-all; color: #fff; margin-top: 5px;">
            <?php echo $imagePath . '?' . $cacheBuster; ?>
        </div>
        <hr style="margin: 10px 0; border-color: #333;">
        <strong style="color: #ff6b6b;">CF Headers Sent:</strong><br>
        CF-Cache-Status: BYPASS<br>
        Cache-Control: no-store<br>
        CDN-Cache-Control: no-store
    </div>
    <?php endif; ?>

    <!-- JS -->
    <script src="./{{ script }}?<?php echo $cacheBuster; ?>"></script>

    <!--
    ========================================
    CLOUDFLARE TIPS:
    ========================================

    1. CREATE PAGE RULE in Cloudflare:
       Pattern: yourdomain.com/path/to/this/folder/*
       Setting: Cache Level = Bypass

    2. OR set Cache TTL to very low:
       Cache Level = Standard
       Browser Cache TTL = 30 minutes

    3. MANUAL PURGE via Cloudflare Dashboard:
       Caching > Configuration > Purge Everything
       OR Purge by URL (faster)

    4. API PURGE (advanced):
       curl -X POST "https://api.cloudflare.com/client/v4/zones/YOUR_ZONE_ID/purge_cache" \
       -H "Authorization: Bearer YOUR_API_TOKEN" \
       -H "Content-Type: application/json" \
       --data '{"files":["https://yourdomain.com/path/{{ page.image_path }}"]}'

    5. USE QUERY STRING SORT OFF:
       In CF Dashboard: Caching > Configuration
       Enable "Query String Sort" = OFF
       This makes ?v=1 and ?v=2 treated as different URLs

    6. DEVELOPMENT MODE:
       Toggle on in CF Dashboard for 3 hours
       Bypasses cache temporarily

    7. USE ?purge=1 in URL:
       Click the hidden refresh link or manually add to URL

    8. ADD DEBUG MODE:
       Add ?debug=1 to see all cache-busting info

    ========================================
    -->
</body>

</html>
"""

PREVIEW_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ page.display_title }} | {{ project.site_name }}</title>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="https://fonts.googleapis.com/css2?family={{ project.font|font_family }}:wght@100..900&display=swap" rel="stylesheet">
    <style>{{ css }}</style>
</head>
<body id="body"{% if single_page %} class="single-page"{% endif %}>
{% if not single_page %}
    <button class="hamburger" aria-label="Toggle menu">
        <span></span>
        <span></span>
        <span></span>
    </button>
    <ul id="site-header">
    {% for item in nav %}
        <li{% if item.active %} class="active"{% endif %}><a href="#">{{ item.name }}</a></li>
    {% endfor %}
    {% if menu.back_to_top %}
        <li><a href="#body" title="Back to Top">&uarr;</a></li>
    {% endif %}
    </ul>
{% endif %}
    <img src="{{ image_src }}?{{ cache_buster }}" alt="{{ page.name }}" style="max-width: 100%; height: auto; {% if not single_page %}padding-top: var(--header-height);{% endif %}">
    <a href="#" class="purge-btn" title="Force cache refresh" onclick="event.preventDefault(); location.reload(true);" style="opacity:0">Force Refresh</a>
    <script>{{ js }}</script>
</body>
</html>
"""

STYLESHEET_TEMPLATE = r""":root {
    --header-height: 58px;
}

*,
*::after,
*::before {
    box-sizing: border-box;
    padding: 0;
    margin: 0;
}

html {
    scroll-behavior: smooth;
    scrollbar-width: thin;
    scrollbar-gutter: stable;
    scrollbar-color: {{ menu.color }} {{ colors.bg }};
    -webkit-font-smoothing: antialiased;
    -moz-osx-font-smoothing: grayscale;
}

body {
    font-family: "{{ project.font }}", sans-serif;
    background-color: {{ colors.bg }};
    color: {{ menu.color }};
    padding: 0;
    margin: 0;
}

img {
    max-width: 100%;
    height: auto;
    padding-top: var(--header-height);
}

/* Hide navigation when only 1 page */
body.single-page #site-header {
    display: none !important;
}

body.single-page img {
    padding-top: 0;
}
{% if single_page %}

#site-header,
.hamburger {
    display: none !important;
}

img {
    padding-top: 0;
}
{% endif %}

ul {
    list-style: none;
    display: flex;
    gap: 10px;
    justify-content: center;
    align-items: center;
    padding: 10px 0;
    margin: 0;
}

{% include "nav/" ~ menu.style ~ ".css.j2" ignore missing %}

ul li.active a {
    background-color: {{ colors.primary }};
    background-image: linear-gradient(0deg, {{ colors.primary }}, {{ colors.secondary }});
    color: #fff;
    border-color: {{ colors.primary }};
}

#site-header {
    position: {{ menu.position }};
    top: 0;
    left: 0;
    width: 100%;
    background: {{ colors.bg }};
    padding: 1rem 2rem;
    box-shadow: 0 2px 10px rgba(0, 0, 0, 0.1);
    transform: translateY(0);
    transition: transform 0.3s ease-in-out;
    z-index: 999;
}

#site-header.hide {
    transform: translateY(-100%);
}

/* Hamburger Menu */
.hamburger {
    display: none;
    flex-direction: column;
    cursor: pointer;
    padding: 10px;
    background: none;
    border: none;
    z-index: 1001;
}

.hamburger span {
    width: 25px;
    height: 3px;
    background-color: {{ menu.color }};
    margin: 3px 0;
    transition: 0.3s;
    border-radius: 2px;
}

.hamburger.active span:nth-child(1) {
    transform: rotate(-45deg) translate(-5px, 6px);
}

.hamburger.active span:nth-child(2) {
    opacity: 0;
}

.hamburger.active span:nth-child(3) {
    transform: rotate(45deg) translate(-5px, -6px);
}

/* Mobile Optimization */
@media (max-width: 768px) {
    /* Show hamburger only when there are multiple pages */
    body:not(.single-page) .hamburger {
        display: flex;
        position: absolute;
        top: 10px;
        right: 15px;
    }

    body:not(.single-page) #site-header {
        display: none;
        flex-direction: column;
        width: 100%;
        gap: 8px;
        padding: 60px 20px 20px;
        background: {{ colors.bg }};
        position: absolute;
        top: 0;
        left: 0;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
    }

    body:not(.single-page) #site-header.mobile-open {
        display: flex;
    }

    body:not(.single-page) #site-header li {
        width: 100%;
    }

    body:not(.single-page) ul li a {
        display: block;
        width: 100%;
        text-align: center;
        padding: 12px;
        font-size: {{ [menu.font_size - 1, 10]|max }}px;
    }
}

@media (max-width: 480px) {
    #site-header {
        padding: 0.5rem 0.75rem;
    }

    ul li a {
        font-size: {{ [menu.font_size - 2, 9]|max }}px;
        padding: 3px 8px;
    }
}
"""

NAV_PILLS_TEMPLATE = r"""ul li a {
    text-decoration: none;
    display: inline-block;
    font-size: {{ menu.font_size }}px;
    letter-spacing: 1px;
    color: {{ menu.color }};
    background-color: {{ colors.bg|shade(-10) }};
    text-transform: uppercase;
    padding: 5px 12px;
    border-radius: 50px;
    transition: all 0.3s ease;
    border: none;
}

ul li a:hover {
    background-color: {{ colors.bg|shade(-20) }};
    transform: translateY(-2px);
}
"""

NAV_UNDERLINE_TEMPLATE = r"""ul li a {
    text-decoration: none;
    display: inline-block;
    font-size: {{ menu.font_size }}px;
    letter-spacing: 1px;
    color: {{ menu.color }};
    background-color: transparent;
    text-transform: uppercase;
    padding: 5px 12px;
    border-radius: 0;
    border-bottom: 2px solid transparent;
    transition: all 0.3s ease;
}

ul li a:hover {
    border-bottom-color: {{ colors.primary }};
}
"""

NAV_BUTTONS_TEMPLATE = r"""ul li a {
    text-decoration: none;
    display: inline-block;
    font-size: {{ menu.font_size }}px;
    letter-spacing: 1px;
    color: {{ menu.color }};
    background-color: {{ colors.bg|shade(-5) }};
    text-transform: uppercase;
    padding: 8px 16px;
    border-radius: 4px;
    border: 1px solid {{ colors.bg|shade(-20) }};
    transition: all 0.3s ease;
}

ul li a:hover {
    background-color: {{ colors.bg|shade(-15) }};
    border-color: {{ colors.primary }};
}
"""

SCRIPT_TEMPLATE = r"""// Hamburger menu toggle
const hamburger = document.querySelector('.hamburger');
const menu = document.querySelector('#site-header');

if (hamburger && menu) {
    hamburger.addEventListener('click', function() {
        this.classList.toggle('active');
        menu.classList.toggle('mobile-open');
    });

    // Close menu when clicking a link
    const menuLinks = menu.querySelectorAll('a');
    menuLinks.forEach(link => {
        link.addEventListener('click', () => {
            hamburger.classList.remove('active');
            menu.classList.remove('mobile-open');
        });
    });
}
{% if menu.auto_hide %}

// Auto-hide menu on scroll
let lastScrollTop = 0;
const header = document.getElementById('site-header');
const scrollThreshold = {{ scroll_threshold }};

window.addEventListener('scroll', function() {
    if (!header) {
        return;
    }
    const scrollTop = window.pageYOffset || document.documentElement.scrollTop;

    if (scrollTop > scrollThreshold) {
        if (scrollTop > lastScrollTop) {
            // Scrolling down
            header.classList.add('hide');
        } else {
            // Scrolling up
            header.classList.remove('hide');
        }
    } else {
        // At top of page
        header.classList.remove('hide');
    }

    lastScrollTop = scrollTop;
});
{% endif %}
"""

HTACCESS_TEMPLATE = r"""# ========================================
# UNIVERSAL CACHE BUSTING CONFIGURATION
# Works with: Apache, LiteSpeed, Nginx (via .htaccess), IIS
# ========================================

# ========================================
# LITESPEED CACHE CONFIGURATION
# ========================================
<IfModule LiteSpeed>
    # Enable LiteSpeed Cache
    CacheLookup on
    
    # Cache static files for 1 year
    <FilesMatch "\.(jpg|jpeg|png|gif|webp|svg|ico|woff|woff2|ttf|eot|otf)$">
        Header set Cache-Control "max-age=31536000, public, immutable"
        Header set X-Cache-Engine "LiteSpeed"
    </FilesMatch>
    
    # Cache CSS/JS for 1 month (with versioning via query strings)
    <FilesMatch "\.(css|js)$">
        Header set Cache-Control "max-age=2592000, public"
        Header set X-Cache-Engine "LiteSpeed"
    </FilesMatch>
    
    # Don't cache PHP files (we handle it in PHP headers)
    <FilesMatch "\.php$">
        Header set Cache-Control "no-store, no-cache, must-revalidate, max-age=0"
        Header set Pragma "no-cache"
        Header set Expires "0"
    </FilesMatch>
</IfModule>

# ========================================
# APACHE + GENERAL SERVER CONFIGURATION
# ========================================

# Enable ETags for better caching
FileETag MTime Size

# GZIP Compression (Apache & LiteSpeed)
<IfModule mod_deflate.c>
    # Compress HTML, CSS, JavaScript, Text, XML and fonts
    AddOutputFilterByType DEFLATE application/javascript
    AddOutputFilterByType DEFLATE application/rss+xml
    AddOutputFilterByType DEFLATE application/vnd.ms-fontobject
    AddOutputFilterByType DEFLATE application/x-font
    AddOutputFilterByType DEFLATE application/x-font-opentype
    AddOutputFilterByType DEFLATE application/x-font-otf
    AddOutputFilterByType DEFLATE application/x-font-truetype
    AddOutputFilterByType DEFLATE application/x-font-ttf
    AddOutputFilterByType DEFLATE application/x-javascript
    AddOutputFilterByType DEFLATE application/xhtml+xml
    AddOutputFilterByType DEFLATE application/xml
    AddOutputFilterByType DEFLATE font/opentype
    AddOutputFilterByType DEFLATE font/otf
    AddOutputFilterByType DEFLATE font/ttf
    AddOutputFilterByType DEFLATE image/svg+xml
    AddOutputFilterByType DEFLATE image/x-icon
    AddOutputFilterByType DEFLATE text/css
    AddOutputFilterByType DEFLATE text/html
    AddOutputFilterByType DEFLATE text/javascript
    AddOutputFilterByType DEFLATE text/plain
    AddOutputFilterByType DEFLATE text/xml
    
    # Remove browser bugs (optional)
    BrowserMatch ^Mozilla/4 gzip-only-text/html
    BrowserMatch ^Mozilla/4\.0[678] no-gzip
    BrowserMatch \bMSIE !no-gzip !gzip-only-text/html
    Header append Vary User-Agent
</IfModule>

# Browser Caching with Expires Headers
<IfModule mod_expires.c>
    ExpiresActive On
    ExpiresDefault "access plus 1 month"
    
    # Images - 1 year
    ExpiresByType image/jpg "access plus 1 year"
    ExpiresByType image/jpeg "access plus 1 year"
    ExpiresByType image/gif "access plus 1 year"
    ExpiresByType image/png "access plus 1 year"
    ExpiresByType image/webp "access plus 1 year"
    ExpiresByType image/svg+xml "access plus 1 year"
    ExpiresByType image/x-icon "access plus 1 year"
    ExpiresByType image/vnd.microsoft.icon "access plus 1 year"
    
    # Fonts - 1 year
    ExpiresByType font/ttf "access plus 1 year"
    ExpiresByType font/otf "access plus 1 year"
    ExpiresByType font/woff "access plus 1 year"
    ExpiresByType font/woff2 "access plus 1 year"
    ExpiresByType application/font-woff "access plus 1 year"
    ExpiresByType application/font-woff2 "access plus 1 year"
    ExpiresByType application/x-font-woff "access plus 1 year"
    ExpiresByType application/vnd.ms-fontobject "access plus 1 year"
    
    # CSS and JavaScript - 1 month (versioned via query strings)
    ExpiresByType text/css "access plus 1 month"
    ExpiresByType text/javascript "access plus 1 month"
    ExpiresByType application/javascript "access plus 1 month"
    ExpiresByType application/x-javascript "access plus 1 month"
    
    # HTML - 1 hour (dynamic content)
    ExpiresByType text/html "access plus 1 hour"
    
    # Data
    ExpiresByType application/json "access plus 0 seconds"
    ExpiresByType application/xml "access plus 0 seconds"
    ExpiresByType text/xml "access plus 0 seconds"
    
    # Media
    ExpiresByType video/mp4 "access plus 1 year"
    ExpiresByType video/webm "access plus 1 year"
    ExpiresByType audio/mp3 "access plus 1 year"
    ExpiresByType audio/ogg "access plus 1 year"
    
    # Documents
    ExpiresByType application/pdf "access plus 1 month"
</IfModule>

# ========================================
# CACHE-CONTROL HEADERS (All Servers)
# ========================================
<IfModule mod_headers.c>
    # Cache static assets aggressively
    <FilesMatch "\.(jpg|jpeg|png|gif|webp|svg|ico|woff|woff2|ttf|eot|otf)$">
        Header set Cache-Control "max-age=31536000, public, immutable"
        Header set X-Content-Type-Options "nosniff"
    </FilesMatch>
    
    # Cache CSS/JS with versioning support
    <FilesMatch "\.(css|js)$">
        Header set Cache-Control "max-age=2592000, public"
        Header unset Pragma
        Header unset Expires
    </FilesMatch>
    
    # Don't cache PHP/HTML (handled in PHP)
    <FilesMatch "\.(php|html)$">
        Header set Cache-Control "no-store, no-cache, must-revalidate, max-age=0"
        Header set Pragma "no-cache"
        Header set Expires "0"
    </FilesMatch>
    
    # Security Headers
    Header set X-Content-Type-Options "nosniff"
    Header set X-Frame-Options "SAMEORIGIN"
    Header set X-XSS-Protection "1; mode=block"
    Header set Referrer-Policy "strict-origin-when-cross-origin"
    Header set Permissions-Policy "geolocation=(), microphone=(), camera=()"
    
    # Remove Server signature
    Header unset Server
    Header unset X-Powered-By
    
    # CORS (if needed - uncomment)
    # Header set Access-Control-Allow-Origin "*"
    # Header set Access-Control-Allow-Methods "GET, POST, OPTIONS"
</IfModule>

# ========================================
# CLOUDFLARE SPECIFIC HEADERS
# ========================================
<IfModule mod_headers.c>
    # Tell Cloudflare to respect our cache headers
    Header set CDN-Cache-Control "public, max-age=2592000"
    
    # For PHP files, bypass Cloudflare cache
    <FilesMatch "\.php$">
        Header set CDN-Cache-Control "no-store"
        Header set CF-Cache-Status "BYPASS"
    </FilesMatch>
</IfModule>

# ========================================
# NGINX COMPATIBILITY (via .htaccess)
# ========================================
# Note: If using pure Nginx, convert these rules to nginx.conf format

# ========================================
# CLEAN URLs (Optional - uncomment to enable)
# ========================================
# <IfModule mod_rewrite.c>
#     RewriteEngine On
#     RewriteBase /
#     
#     # Remove .php extension
#     RewriteCond %{REQUEST_FILENAME} !-f
#     RewriteCond %{REQUEST_FILENAME} !-d
#     RewriteRule ^([^.]+)$ $1.php [NC,L]
#     
#     # Force HTTPS (uncomment if needed)
#     # RewriteCond %{HTTPS} off
#     # RewriteRule ^(.*)$ https://%{HTTP_HOST}%{REQUEST_URI} [L,R=301]
#     
#     # Force WWW (uncomment if needed)
#     # RewriteCond %{HTTP_HOST} !^www\.
#     # RewriteRule ^(.*)$ https://www.%{HTTP_HOST}/$1 [R=301,L]
# </IfModule>

# ========================================
# QUERY STRING CACHE BUSTING
# ========================================
# Allow different query strings to be cached separately
# This makes ?v=1 and ?v=2 different cached versions
<IfModule mod_rewrite.c>
    RewriteEngine On
    # Don't cache if purge parameter is present
    RewriteCond %{QUERY_STRING} purge=
    RewriteRule .* - [E=no-cache:1]
</IfModule>

# ========================================
# DISABLE DIRECTORY BROWSING
# ========================================
Options -Indexes

# ========================================
# PROTECT SENSITIVE FILES
# ========================================
<FilesMatch "\.(htaccess|htpasswd|ini|log|sh|sql|conf|bak)$">
    Order Allow,Deny
    Deny from all
</FilesMatch>

# ========================================
# IIS COMPATIBILITY NOTES
# ========================================
# If using IIS, create a web.config file with equivalent rules:
# - Use <staticContent> for cache headers
# - Use <httpCompression> for GZIP
# - Use <rewrite> for URL rewriting
# - Use <customHeaders> for security headers

# ========================================
# PERFORMANCE OPTIMIZATIONS
# ========================================

# Disable ETags for better caching across servers
# (Uncomment if you have multiple servers)
# Header unset ETag
# FileETag None

# Limit request size (prevent DoS)
LimitRequestBody 10485760

# ========================================
# TROUBLESHOOTING
# ========================================
# If cache isn't working:
# 1. Check if mod_headers and mod_expires are enabled
# 2. Verify file permissions (644 for files, 755 for directories)
# 3. Clear browser cache (Ctrl+Shift+R)
# 4. Check server error logs
# 5. Use ?purge=1 to force refresh
# 6. Enable Cloudflare Development Mode (if using CF)
# 7. Verify .htaccess is being read (add syntax error to test)
"""

TEMPLATES = {
    "page.php.j2": PAGE_TEMPLATE,
    "preview.html.j2": PREVIEW_TEMPLATE,
    "style.css.j2": STYLESHEET_TEMPLATE,
    "script.js.j2": SCRIPT_TEMPLATE,
    "nav/pills.css.j2": NAV_PILLS_TEMPLATE,
    "nav/underline.css.j2": NAV_UNDERLINE_TEMPLATE,
    "nav/buttons.css.j2": NAV_BUTTONS_TEMPLATE,
}
